import logging

import pytest
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from newsfront.exceptions import RenderError, UpstreamStatusError, UpstreamUnavailableError
from newsfront.main import create_app
from newsfront.rendering import PageRenderer
from conftest import NEWS_API_UNAUTHORIZED, make_response


class TestIndex:
    def test_renders_empty_page(self, api_client, mock_news_client):
        resp = api_client.get("/")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        assert "News Search" in resp.text
        assert "news-article" not in resp.text
        mock_news_client.search.assert_not_called()


class TestSearch:
    def test_renders_results(self, api_client):
        resp = api_client.get("/search?q=golang")
        assert resp.status_code == 200
        assert "Go 1.22 released" in resp.text
        assert "March 5, 2024" in resp.text
        assert "<strong>45</strong> results found" in resp.text

    def test_first_page_links(self, api_client):
        resp = api_client.get("/search?q=golang")
        assert "page=2" in resp.text
        assert "previous-page" not in resp.text

    def test_last_page_links(self, api_client):
        resp = api_client.get("/search?q=golang&page=3")
        assert "page=2" in resp.text
        assert "next-page" not in resp.text

    def test_forwards_params(self, api_client, mock_news_client):
        api_client.get("/search?q=golang&page=2")
        mock_news_client.search.assert_called_once_with("golang", page=2, page_size=20)

    def test_defaults_to_first_page_with_empty_query(self, api_client, mock_news_client):
        resp = api_client.get("/search?q=")
        assert resp.status_code == 200
        mock_news_client.search.assert_called_once_with("", page=1, page_size=20)

    def test_escapes_query(self, api_client):
        resp = api_client.get("/search", params={"q": "<script>alert(1)</script>"})
        assert "<script>alert(1)</script>" not in resp.text
        assert "&lt;script&gt;" in resp.text

    def test_no_results(self, api_client, mock_news_client, empty_results):
        mock_news_client.search.return_value = empty_results
        resp = api_client.get("/search?q=zzzz")
        assert resp.status_code == 200
        assert "news-article" not in resp.text
        assert "next-page" not in resp.text


class TestInvalidPage:
    @pytest.mark.parametrize("page", ["abc", "0", "-3", "1_000", "%202"])
    def test_returns_400_without_upstream_call(self, api_client, mock_news_client, page):
        resp = api_client.get(f"/search?q=golang&page={page}")
        assert resp.status_code == 400
        assert resp.text == "Invalid page number"
        mock_news_client.search.assert_not_called()


class TestUpstreamErrors:
    def test_status_error_returns_500(self, api_client, mock_news_client):
        mock_news_client.search.side_effect = UpstreamStatusError(401, "apiKeyInvalid")
        resp = api_client.get("/search?q=golang")
        assert resp.status_code == 500
        assert resp.text == "Failed to get news"
        assert "apiKeyInvalid" not in resp.text

    def test_unavailable_returns_500(self, api_client, mock_news_client):
        mock_news_client.search.side_effect = UpstreamUnavailableError("timed out")
        resp = api_client.get("/search?q=golang")
        assert resp.status_code == 500

    def test_unauthorized_upstream_end_to_end(self, settings, mock_session, caplog):
        """A 401 from the news API is logged with its status and no articles are rendered."""
        from newsfront.services.news import NewsClient

        mock_session.get.return_value = make_response(401, payload=NEWS_API_UNAUTHORIZED, text="apiKeyInvalid")
        client = TestClient(create_app(settings, news_client=NewsClient(settings, session=mock_session)))
        with caplog.at_level(logging.ERROR):
            resp = client.get("/search?q=golang")
        assert resp.status_code == 500
        assert "news-article" not in resp.text
        assert "News API status code error: 401" in caplog.text


class TestRenderErrors:
    def test_render_error_returns_500(self, settings, mock_news_client):
        renderer = MagicMock(spec=PageRenderer)
        renderer.render.side_effect = RenderError("Failed to render template")
        client = TestClient(create_app(settings, news_client=mock_news_client, renderer=renderer))
        resp = client.get("/search?q=golang")
        assert resp.status_code == 500
        assert resp.text == "Failed to render template"


class TestAssets:
    def test_serves_stylesheet(self, api_client):
        resp = api_client.get("/assets/style.css")
        assert resp.status_code == 200
        assert "text/css" in resp.headers["content-type"]

    def test_missing_asset(self, api_client):
        assert api_client.get("/assets/nope.css").status_code == 404


class TestHealthz:
    def test_ok(self, api_client):
        resp = api_client.get("/healthz")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}
