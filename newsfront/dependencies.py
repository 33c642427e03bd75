from fastapi import Request

from newsfront.config import Settings
from newsfront.rendering import PageRenderer
from newsfront.services.news import NewsClient


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_news_client(request: Request) -> NewsClient:
    return request.app.state.news_client


def get_renderer(request: Request) -> PageRenderer:
    return request.app.state.renderer
