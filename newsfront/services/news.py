import logging
from urllib.parse import urlencode

import requests
from pydantic import ValidationError

from newsfront.config import Settings
from newsfront.exceptions import (
    ConfigurationError,
    DecodeError,
    UpstreamStatusError,
    UpstreamUnavailableError,
)
from newsfront.http_client import new_session
from newsfront.models.news import Article, ArticleSource, ResultSet
from newsfront.pagination import MAX_PAGE_SIZE

logger = logging.getLogger(__name__)

LOGGED_BODY_LIMIT = 500


def redact_api_key(key: str) -> str:
    """Mask all but the last four characters of an API key."""
    if len(key) <= 4:
        return "****"
    return "********" + key[-4:]


def _parse_article(item: dict) -> Article:
    source = item.get("source") or {}
    return Article(
        source=ArticleSource(id=source.get("id"), name=source.get("name") or ""),
        author=item.get("author"),
        title=item.get("title") or "",
        description=item.get("description"),
        url=item.get("url") or "",
        image_url=item.get("urlToImage"),
        published_at=item.get("publishedAt"),
        content=item.get("content"),
    )


def _parse_results(data: dict) -> ResultSet:
    if not isinstance(data, dict):
        raise DecodeError(f"Expected a JSON object, got {type(data).__name__}")
    try:
        return ResultSet(
            status=data.get("status", "ok"),
            total_results=data.get("totalResults") or 0,
            articles=[_parse_article(item) for item in data.get("articles") or []],
        )
    except (ValidationError, AttributeError, TypeError) as e:
        raise DecodeError(f"Unexpected News API payload: {e}") from e


class NewsClient:
    """Client for the news API ``everything`` endpoint."""

    def __init__(self, settings: Settings, session: requests.Session | None = None):
        if not settings.news_api_key:
            raise ConfigurationError(
                "News API key not configured. Get one at https://newsapi.org and set NEWS_API_KEY in .env or pass --apikey"
            )
        self._api_key = settings.news_api_key
        self._endpoint = f"{settings.news_api_base.rstrip('/')}/everything"
        self._language = settings.search_language
        self._sort_by = settings.search_sort_by
        self._timeout = settings.request_timeout
        self._session = session or new_session()

    def _params(self, query: str, page: int, page_size: int, api_key: str) -> dict:
        return {
            "q": query,
            "pageSize": min(page_size, MAX_PAGE_SIZE),
            "page": page,
            "apiKey": api_key,
            "sortBy": self._sort_by,
            "language": self._language,
        }

    def request_url(self, query: str, page: int, page_size: int) -> str:
        """The request URL with the API key redacted, for logging."""
        params = self._params(query, page, page_size, redact_api_key(self._api_key))
        return f"{self._endpoint}?{urlencode(params, safe='*')}"

    def search(self, query: str, page: int = 1, page_size: int = 20) -> ResultSet:
        """Fetch one page of articles matching ``query``.

        Raises UpstreamUnavailableError, UpstreamStatusError or DecodeError.
        """
        logger.info("Requesting URL: %s", self.request_url(query, page, page_size))
        try:
            resp = self._session.get(
                self._endpoint,
                params=self._params(query, page, page_size, self._api_key),
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.error("News API request failed: %s", e)
            raise UpstreamUnavailableError(f"News API unreachable: {e}") from e

        if resp.status_code != 200:
            body = resp.text[:LOGGED_BODY_LIMIT]
            logger.error("News API status code error: %d, body: %s", resp.status_code, body)
            raise UpstreamStatusError(resp.status_code, body)

        try:
            data = resp.json()
        except ValueError as e:
            logger.error("News API JSON decode error: %s", e)
            raise DecodeError(f"News API returned malformed JSON: {e}") from e

        if isinstance(data, dict) and data.get("status") == "error":
            message = f"{data.get('code', '')}: {data.get('message', '')}"
            logger.error("News API error payload: %s", message)
            raise UpstreamStatusError(resp.status_code, message)

        try:
            return _parse_results(data)
        except DecodeError as e:
            logger.error("News API decode error: %s", e)
            raise

    def close(self) -> None:
        self._session.close()
