import json

import pytest
import requests
from fastapi.testclient import TestClient

from headline.config import Settings, get_settings


# --- Canned API responses ---

NEWS_API_ARTICLE = {
    "source": {"id": "wired", "name": "Wired"},
    "author": "Jane Doe",
    "title": "Bitcoin hits a new high",
    "description": "Crypto markets rallied overnight.",
    "url": "https://www.wired.com/story/bitcoin-high",
    "urlToImage": "https://media.wired.com/photos/bitcoin.jpg",
    "publishedAt": "2021-03-05T00:00:00Z",
    "content": "Crypto markets rallied overnight as…",
}

NEWS_API_EVERYTHING = {
    "status": "ok",
    "totalResults": 45,
    "articles": [
        NEWS_API_ARTICLE,
        {
            "source": {"id": None, "name": "Example Blog"},
            "author": None,
            "title": "Why bitcoin matters",
            "description": None,
            "url": "https://blog.example.com/bitcoin",
            "urlToImage": None,
            "publishedAt": "2021-03-04T18:30:00Z",
            "content": None,
        },
    ],
}

NEWS_API_THREE_PAGES = {**NEWS_API_EVERYTHING, "totalResults": 60}

NEWS_API_KEY_INVALID = {
    "status": "error",
    "code": "apiKeyInvalid",
    "message": "Your API key is invalid",
}


def make_response(status_code: int, body) -> requests.Response:
    """Build a requests.Response; dicts are sent as JSON, strings as-is."""
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = (json.dumps(body) if not isinstance(body, str) else body).encode()
    resp.encoding = "utf-8"
    return resp


@pytest.fixture
def mock_session(mocker):
    """Shared requests.Session used by the news service."""
    session = mocker.MagicMock()
    mocker.patch("headline.services.news.get_session", return_value=session)
    return session


@pytest.fixture
def settings():
    return Settings(news_api_key="test-key")


@pytest.fixture
def api_client(settings):
    """FastAPI TestClient with a configured API key."""
    from headline.main import app
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()
