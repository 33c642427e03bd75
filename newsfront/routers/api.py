from fastapi import APIRouter, Depends

from newsfront.config import Settings
from newsfront.dependencies import get_app_settings, get_news_client
from newsfront.models.search import SearchState
from newsfront.services import search as search_service
from newsfront.services.news import NewsClient

router = APIRouter(prefix="/api", tags=["search"])


@router.get("/search")
def search(
    q: str = "",
    page: str | None = None,
    settings: Settings = Depends(get_app_settings),
    client: NewsClient = Depends(get_news_client),
) -> SearchState:
    """Same search as the HTML page, returned as JSON."""
    return search_service.run_search(client, q, search_service.parse_page(page), settings.page_size)
