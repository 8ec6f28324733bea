"""Pydantic DTOs (Data Transfer Objects) for the Article feature.

Wire fields are camelCase (``imageUrl``, ``createdAt``); snake_case names are
accepted too. Required-field checks live in ArticleService so that missing
and blank values are reported the same way.
"""

from datetime import datetime

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

_CAMEL_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
    "from_attributes": True,
}


class ArticleCreate(BaseModel):
    """Schema for creating a new article."""

    title: str | None = Field(None, examples=["Hello, world"])
    content: str | None = Field(None, examples=["The first post on this blog."])
    excerpt: str | None = None
    image_url: str | None = None
    video_url: str | None = None
    audio_url: str | None = None

    model_config = _CAMEL_CONFIG


class ArticleUpdate(BaseModel):
    """Schema for updating an existing article — all fields optional.

    For the media URL fields an explicit ``null`` or ``""`` clears the value,
    while an omitted key leaves it unchanged (see ``model_fields_set``).
    """

    title: str | None = None
    content: str | None = None
    excerpt: str | None = None
    image_url: str | None = None
    video_url: str | None = None
    audio_url: str | None = None

    model_config = _CAMEL_CONFIG


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    title: str
    content: str
    excerpt: str
    image_url: str | None
    video_url: str | None
    audio_url: str | None
    author_id: str
    created_at: datetime
    updated_at: datetime

    model_config = _CAMEL_CONFIG


class ArticleEnvelope(BaseModel):
    article: ArticleResponse
    success: bool = True


class ArticleListResponse(BaseModel):
    articles: list[ArticleResponse]


class ArticleDetailResponse(BaseModel):
    """Body of a single-article read; no success flag, nothing was mutated."""

    article: ArticleResponse
