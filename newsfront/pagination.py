"""Pagination bounds for a page of search results.

Pages are 1-based. A result set with no hits still has one (empty) page, and
``0`` stands for "no such page" in ``previous_page`` and ``next_page``.
"""

from typing import NamedTuple

PAGE_SIZE = 20
# newsapi.org rejects larger pageSize values
MAX_PAGE_SIZE = 100
NO_PAGE = 0


class Pagination(NamedTuple):
    total_pages: int
    previous_page: int
    next_page: int


def total_pages(total_results: int, page_size: int = PAGE_SIZE) -> int:
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    if total_results <= 0:
        return 1
    return (total_results + page_size - 1) // page_size


def paginate(total_results: int, current_page: int, page_size: int = PAGE_SIZE) -> Pagination:
    """Compute total pages and the neighbours of ``current_page``.

    ``current_page`` has no upper bound: a page past the end is valid and
    simply has no next page.
    """
    if current_page < 1:
        raise ValueError(f"current_page must be >= 1, got {current_page}")
    pages = total_pages(total_results, page_size)
    previous_page = current_page - 1 if current_page > 1 else NO_PAGE
    next_page = current_page + 1 if current_page < pages else NO_PAGE
    return Pagination(pages, previous_page, next_page)
