import logging
from typing import Optional

import requests

from microparse.config import get_settings

logger = logging.getLogger(__name__)


def build_headers() -> dict:
    return {
        "User-Agent": get_settings().user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
    }


def fetch_html(url: str) -> Optional[str]:
    """
    Download a page. Returns None when the request fails.
    """
    settings = get_settings()

    try:
        r = requests.get(
            url,
            headers=build_headers(),
            timeout=settings.request_timeout,
            allow_redirects=True
        )
        r.raise_for_status()
    except requests.RequestException as e:
        logger.warning(f"Fetch failed for {url}: {e}")
        return None

    logger.info(f"Fetched {url}: status={r.status_code} size={len(r.text)}")
    return r.text[:settings.max_html_size]
