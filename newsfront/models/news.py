from datetime import datetime

from pydantic import BaseModel, Field


class ArticleSource(BaseModel):
    id: str | int | None = None
    name: str = ""


class Article(BaseModel):
    source: ArticleSource
    author: str | None = None
    title: str = ""
    description: str | None = None
    url: str = ""
    image_url: str | None = None
    published_at: datetime | None = None
    content: str | None = None

    @property
    def published_date(self) -> str:
        """Publication date as e.g. 'March 5, 2024'; empty when unknown."""
        if self.published_at is None:
            return ""
        return f"{self.published_at:%B} {self.published_at.day}, {self.published_at.year}"


class ResultSet(BaseModel):
    status: str = "ok"
    total_results: int = Field(0, ge=0)
    articles: list[Article] = []
