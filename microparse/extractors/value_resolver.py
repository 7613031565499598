import logging
from typing import Optional
from urllib.parse import urljoin
from bs4 import Tag

from microparse.utils.html import minify

logger = logging.getLogger(__name__)


def resolve_url(reference: Optional[str], base_url: str) -> Optional[str]:
    """
    Resolve a (possibly relative) URL against the base URL.
    Returns None for missing/empty references and for references that
    cannot be parsed; callers treat that as an absent value.
    """
    if not reference:
        return None

    try:
        return urljoin(base_url, reference)
    except ValueError as e:
        logger.debug(f"Unresolvable URL {reference!r} ignored: {e}")
        return None


def resolve_value(node: Tag, base_url: str) -> str:
    """
    Scalar value of a leaf element. First non-empty source wins:
    content, href, src, then the element's minified text.
    """
    content = node.get("content")
    if content:
        logger.debug(f"CONTENT: {content}")
        return content

    for attr in ("href", "src"):
        reference = node.get(attr)
        if reference is None:
            continue

        logger.debug(f"{attr.upper()}: {reference}")
        resolved = resolve_url(reference, base_url)
        if resolved:
            return resolved

    text = minify(node.get_text()).strip()
    logger.debug(f"TEXT: {text}")
    return text
