from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Source(BaseModel):
    model_config = ConfigDict(frozen=True)

    # News API sends null for most sources, a string slug for the rest.
    id: str | int | float | None = None
    name: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return "" if value is None else value


class Article(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source: Source = Field(default_factory=Source)
    author: str = ""
    title: str = ""
    description: str = ""
    url: str = ""
    url_to_image: str = Field("", alias="urlToImage")
    published_at: datetime | None = Field(None, alias="publishedAt")
    content: str = ""

    @field_validator("author", "title", "description", "url", "url_to_image", "content", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return "" if value is None else value

    @field_validator("source", mode="before")
    @classmethod
    def _null_source(cls, value):
        return Source() if value is None else value

    def formatted_published_date(self) -> str:
        """Publication date as e.g. 'March 5, 2021'."""
        if self.published_at is None:
            return ""
        return f"{self.published_at:%B} {self.published_at.day}, {self.published_at.year}"


class Results(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: str = ""
    total_results: int = Field(0, alias="totalResults", ge=0)
    articles: list[Article] = Field(default_factory=list)

    @field_validator("status", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return "" if value is None else value

    @field_validator("total_results", mode="before")
    @classmethod
    def _null_as_zero(cls, value):
        return 0 if value is None else value

    @field_validator("articles", mode="before")
    @classmethod
    def _null_as_no_articles(cls, value):
        return [] if value is None else value


class NewsAPIError(BaseModel):
    status: str = ""
    code: str = ""
    message: str = ""

    @field_validator("status", "code", "message", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return "" if value is None else value
