import pytest

from microparse.config import get_settings

BASE_URL = "http://ex.com/"


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for name in (
        "MICROPARSE_MAX_HTML_SIZE",
        "MICROPARSE_REQUEST_TIMEOUT",
        "MICROPARSE_USER_AGENT",
        "MICROPARSE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
