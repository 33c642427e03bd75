from pydantic import BaseModel, Field, computed_field

from newsfront.models.news import ResultSet


class SearchState(BaseModel):
    """View model for one rendered search page."""

    query: str = ""
    current_page: int = Field(1, ge=1)
    total_pages: int = Field(1, ge=1)
    previous_page: int = Field(0, ge=0)
    next_page: int = Field(0, ge=0)
    results: ResultSet = Field(default_factory=ResultSet)

    @computed_field
    @property
    def has_previous_page(self) -> bool:
        return self.previous_page > 0

    @computed_field
    @property
    def has_next_page(self) -> bool:
        return self.next_page > 0

    @computed_field
    @property
    def is_last_page(self) -> bool:
        return self.current_page >= self.total_pages
