from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

from newsfront.pagination import MAX_PAGE_SIZE, PAGE_SIZE

PACKAGE_DIR = Path(__file__).parent


class Settings(BaseSettings):
    host: str = "127.0.0.1"
    port: int = 9000
    log_level: str = "INFO"
    log_json: bool = False
    news_api_key: str = Field("", validation_alias=AliasChoices("news_api_key", "apikey"))
    news_api_base: str = "https://newsapi.org/v2"
    page_size: int = Field(PAGE_SIZE, gt=0, le=MAX_PAGE_SIZE)
    search_language: str = "en"
    search_sort_by: str = "publishedAt"
    request_timeout: float = 10.0
    templates_dir: Path = PACKAGE_DIR / "templates"
    assets_dir: Path = PACKAGE_DIR / "assets"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "frozen": True,
        "populate_by_name": True,
    }


@lru_cache
def get_settings() -> Settings:
    return Settings()
