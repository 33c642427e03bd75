from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from newsfront.config import Settings
from newsfront.dependencies import get_app_settings, get_news_client, get_renderer
from newsfront.rendering import PageRenderer
from newsfront.services import search as search_service
from newsfront.services.news import NewsClient

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
def index(renderer: PageRenderer = Depends(get_renderer)) -> HTMLResponse:
    return HTMLResponse(renderer.render(search_service.empty_search()))


@router.get("/search", response_class=HTMLResponse)
def search(
    q: str = "",
    page: str | None = None,
    settings: Settings = Depends(get_app_settings),
    client: NewsClient = Depends(get_news_client),
    renderer: PageRenderer = Depends(get_renderer),
) -> HTMLResponse:
    state = search_service.run_search(client, q, search_service.parse_page(page), settings.page_size)
    return HTMLResponse(renderer.render(state))
