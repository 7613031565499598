import os
import logging
from dataclasses import dataclass
from functools import lru_cache
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_MAX_HTML_SIZE = 5_000_000
DEFAULT_REQUEST_TIMEOUT = 20.0
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    max_html_size: int = DEFAULT_MAX_HTML_SIZE
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = DEFAULT_LOG_LEVEL


# --------------------------------------------------
# ENV PARSING
# --------------------------------------------------

def _env_number(name: str, default, cast):
    raw = os.getenv(name)

    if raw is None or not raw.strip():
        return default

    try:
        value = cast(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")

    return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load settings from the environment (and a local .env file, if any).
    Cached for the lifetime of the process; call get_settings.cache_clear()
    to reload.
    """
    load_dotenv()

    settings = Settings(
        max_html_size=_env_number(
            "MICROPARSE_MAX_HTML_SIZE", DEFAULT_MAX_HTML_SIZE, int
        ),
        request_timeout=_env_number(
            "MICROPARSE_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT, float
        ),
        user_agent=os.getenv("MICROPARSE_USER_AGENT") or DEFAULT_USER_AGENT,
        log_level=(os.getenv("MICROPARSE_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    )

    logger.debug(f"Settings loaded: {settings}")
    return settings
