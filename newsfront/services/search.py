"""Build the search page view model for a request."""

import logging
import re

from newsfront.exceptions import InvalidInputError
from newsfront.models.search import SearchState
from newsfront.pagination import PAGE_SIZE, paginate
from newsfront.services.news import NewsClient

logger = logging.getLogger(__name__)

PAGE_PATTERN = re.compile(r"\+?[0-9]+")


def parse_page(raw: str | None) -> int:
    """Parse the ``page`` query parameter; absent or empty means page 1.

    Only plain decimal digits (with an optional leading ``+``) are accepted.
    """
    if raw is None or raw == "":
        return 1
    if not PAGE_PATTERN.fullmatch(raw):
        logger.warning("Error converting page to integer: %r", raw)
        raise InvalidInputError("Invalid page number")
    page = int(raw)
    if page < 1:
        logger.warning("Page number out of range: %d", page)
        raise InvalidInputError("Invalid page number")
    return page


def empty_search() -> SearchState:
    return SearchState()


def run_search(client: NewsClient, query: str, page: int, page_size: int = PAGE_SIZE) -> SearchState:
    results = client.search(query, page=page, page_size=page_size)
    pagination = paginate(results.total_results, page, page_size)
    state = SearchState(
        query=query,
        current_page=page,
        total_pages=pagination.total_pages,
        previous_page=pagination.previous_page,
        next_page=pagination.next_page,
        results=results,
    )
    logger.debug(
        "query=%r page=%d/%d previous=%d next=%d total_results=%d",
        state.query,
        state.current_page,
        state.total_pages,
        state.previous_page,
        state.next_page,
        results.total_results,
    )
    return state
