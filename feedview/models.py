"""Pydantic models for feedview."""

from pydantic import BaseModel, Field, model_validator


class Item(BaseModel):
    """One normalized feed entry. Unresolved fields are empty strings."""

    title: str = Field(default="", description="Entry headline")
    link: str = Field(default="", description="Link to the full article")
    published_raw: str = Field(
        default="", description="Publish date exactly as the feed gave it"
    )
    published_display: str = Field(
        default="", description="Human-readable date, or the raw string"
    )
    body: str = Field(default="", description="Description/summary/content HTML")
    author: str = Field(default="", description="Author name")
    image: str = Field(default="", description="Representative image URL")

    model_config = {"frozen": True}


class Feed(BaseModel):
    """A normalized syndication document."""

    title: str = Field(default="Feed", description="Feed title")
    link: str = Field(default="", description="Feed home page")
    description: str = Field(default="", description="Feed description/subtitle")
    items: tuple[Item, ...] = Field(
        default=(), description="Entries in document order"
    )

    model_config = {"frozen": True}


class FeedPage(BaseModel):
    """Result of one pipeline run: either a feed or a user-visible error."""

    feed: Feed | None = None
    error: str | None = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _exactly_one(self) -> "FeedPage":
        if (self.feed is None) == (self.error is None):
            raise ValueError("FeedPage needs exactly one of feed or error")
        return self

    @property
    def ok(self) -> bool:
        return self.feed is not None
