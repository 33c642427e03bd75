import argparse
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from fastapi.staticfiles import StaticFiles

from newsfront.config import Settings, get_settings
from newsfront.exceptions import ConfigurationError, IntegrationError, InvalidInputError, RenderError
from newsfront.logging_config import configure_logging
from newsfront.models.common import ErrorResponse, HealthResponse
from newsfront.rendering import PageRenderer
from newsfront.routers.api import router as api_router
from newsfront.routers.pages import router as pages_router
from newsfront.services.news import NewsClient, redact_api_key

logger = logging.getLogger(__name__)


# --- Exception handlers ---

def _error_response(request: Request, status_code: int, error_code: str, message: str) -> Response:
    if request.url.path.startswith("/api/"):
        body = ErrorResponse(error_code=error_code, message=message)
        return JSONResponse(status_code=status_code, content=body.model_dump())
    return PlainTextResponse(message, status_code=status_code)


async def invalid_input_handler(request: Request, exc: InvalidInputError) -> Response:
    return _error_response(request, 400, "invalid_input", "Invalid page number")


async def integration_error_handler(request: Request, exc: IntegrationError) -> Response:
    logger.error("Error getting news for %s: %s", request.url.path, exc)
    return _error_response(request, 500, "upstream_error", "Failed to get news")


async def render_error_handler(request: Request, exc: RenderError) -> Response:
    return _error_response(request, 500, "render_error", "Failed to render template")


# --- FastAPI app ---

def create_app(
    settings: Settings,
    news_client: NewsClient | None = None,
    renderer: PageRenderer | None = None,
) -> FastAPI:
    """Build the application. Raises ConfigurationError if it cannot start."""
    renderer = renderer or PageRenderer(settings.templates_dir)
    news_client = news_client or NewsClient(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        news_client.close()

    api = FastAPI(title="newsfront", version="0.1.0", lifespan=lifespan)
    api.state.settings = settings
    api.state.news_client = news_client
    api.state.renderer = renderer

    api.include_router(pages_router)
    api.include_router(api_router)
    api.mount("/assets", StaticFiles(directory=settings.assets_dir, check_dir=False), name="assets")

    @api.get("/healthz")
    def healthz() -> HealthResponse:
        return HealthResponse(status="ok")

    api.add_exception_handler(InvalidInputError, invalid_input_handler)
    api.add_exception_handler(IntegrationError, integration_error_handler)
    api.add_exception_handler(RenderError, render_error_handler)
    return api


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="newsfront", description="News search front end")
    parser.add_argument("--apikey", default=None, help="newsapi.org access key (overrides NEWS_API_KEY)")
    return parser.parse_args(argv)


def run(argv: list[str] | None = None):
    args = parse_args(argv)
    settings = get_settings()
    if args.apikey:
        settings = settings.model_copy(update={"news_api_key": args.apikey})
    configure_logging(settings)

    try:
        app = create_app(settings)
    except ConfigurationError as e:
        logger.critical("%s", e)
        raise SystemExit(1) from e

    logger.info("Using API key: %s", redact_api_key(settings.news_api_key))
    logger.info("Server listening on %s:%d", settings.host, settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
    )


if __name__ == "__main__":
    run()
