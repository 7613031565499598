import pytest
from fastapi.testclient import TestClient

from microparse.api import microdata as microdata_api
from microparse.config import get_settings
from microparse.main import app


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_extract_from_html(client):
    response = client.post("/api/microdata", json={
        "html": '<div itemscope itemprop="author" href="/bio">'
                '<span itemprop="name">Jo</span></div>',
        "base_url": "http://ex.com/",
    })

    assert response.status_code == 200
    assert response.json() == {
        "base_url": "http://ex.com/",
        "microdata": {"author": {"url": "http://ex.com/bio", "name": "Jo"}},
    }


def test_extract_from_url(client, monkeypatch):
    monkeypatch.setattr(
        microdata_api,
        "fetch_html",
        lambda url: '<ul><li itemprop="tag">a</li><li itemprop="tag">b</li></ul>',
    )

    response = client.post("/api/microdata", json={"url": "http://ex.com/page"})

    assert response.status_code == 200
    assert response.json() == {
        "base_url": "http://ex.com/page",
        "microdata": {"tag": ["a", "b"]},
    }


def test_fetch_failure_is_bad_gateway(client, monkeypatch):
    monkeypatch.setattr(microdata_api, "fetch_html", lambda url: None)

    response = client.post("/api/microdata", json={"url": "http://ex.com/down"})

    assert response.status_code == 502


def test_html_without_base_url_is_rejected(client):
    response = client.post("/api/microdata", json={"html": "<p></p>"})
    assert response.status_code == 400


def test_relative_base_url_is_rejected(client):
    response = client.post("/api/microdata", json={"html": "<p></p>", "base_url": "/x"})
    assert response.status_code == 400


def test_empty_payload_is_rejected(client):
    response = client.post("/api/microdata", json={})
    assert response.status_code == 400


def test_oversized_html_is_rejected(client, monkeypatch):
    monkeypatch.setenv("MICROPARSE_MAX_HTML_SIZE", "10")
    get_settings.cache_clear()

    response = client.post("/api/microdata", json={
        "html": "<p>" + "x" * 50 + "</p>",
        "base_url": "http://ex.com/",
    })

    assert response.status_code == 413
