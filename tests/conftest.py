import pytest
from unittest.mock import MagicMock

import requests
from fastapi.testclient import TestClient

from newsfront.config import Settings
from newsfront.models.news import ResultSet
from newsfront.services.news import NewsClient, _parse_results


# --- Canned API responses ---

NEWS_API_ARTICLE = {
    "source": {"id": "the-verge", "name": "The Verge"},
    "author": "Jane Doe",
    "title": "Go 1.22 released",
    "description": "The latest Go release brings range-over-int.",
    "url": "https://www.theverge.com/go-1-22",
    "urlToImage": "https://cdn.theverge.com/go.jpg",
    "publishedAt": "2024-03-05T14:30:00Z",
    "content": "Go 1.22 is out today...",
}

NEWS_API_EVERYTHING = {
    "status": "ok",
    "totalResults": 45,
    "articles": [NEWS_API_ARTICLE],
}

NEWS_API_EMPTY = {"status": "ok", "totalResults": 0, "articles": []}

NEWS_API_UNAUTHORIZED = {
    "status": "error",
    "code": "apiKeyInvalid",
    "message": "Your API key is invalid or incorrect.",
}

TEST_API_KEY = "test-key-1234"


def make_response(status_code: int = 200, payload=None, text: str = "") -> MagicMock:
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status_code
    resp.text = text
    if payload is None:
        resp.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
    else:
        resp.json.return_value = payload
    return resp


@pytest.fixture
def settings():
    return Settings(news_api_key=TEST_API_KEY, _env_file=None)


@pytest.fixture
def mock_session():
    session = MagicMock(spec=requests.Session)
    session.get.return_value = make_response(payload=NEWS_API_EVERYTHING)
    return session


@pytest.fixture
def news_client(settings, mock_session):
    """NewsClient backed by a mocked requests.Session."""
    return NewsClient(settings, session=mock_session)


@pytest.fixture
def mock_news_client():
    client = MagicMock(spec=NewsClient)
    client.search.return_value = _parse_results(NEWS_API_EVERYTHING)
    return client


@pytest.fixture
def empty_results():
    return ResultSet(status="ok", total_results=0, articles=[])


@pytest.fixture
def api_client(settings, mock_news_client):
    """TestClient for an app whose upstream client is mocked."""
    from newsfront.main import create_app
    return TestClient(create_app(settings, news_client=mock_news_client))
