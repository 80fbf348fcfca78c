"""News data models."""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


class Article(BaseModel):
    """A single news article."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    description: Optional[str] = None
    url: str
    source: Optional[str] = Field(None, description="Publisher name")
    published_at: Optional[str] = Field(None, alias="publishedAt", description="Publication timestamp")


class NewsBundle(BaseModel):
    """Articles found for a city."""

    city: str
    total: int = 0
    articles: List[Article] = Field(default_factory=list)

    @model_validator(mode="after")
    def _sync_total(self) -> "NewsBundle":
        # total always reflects the number of articles actually returned
        self.total = len(self.articles)
        return self
