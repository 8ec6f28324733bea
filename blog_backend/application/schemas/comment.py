"""Pydantic DTOs for the Comment feature."""

from datetime import datetime

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class CommentCreate(BaseModel):
    """Schema for posting a comment — open to anonymous readers."""

    name: str | None = Field(None, examples=["Ada"])
    content: str | None = Field(None, examples=["Great read, thanks!"])


class CommentResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    article_id: str
    name: str
    content: str
    created_at: datetime

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


class CommentEnvelope(BaseModel):
    comment: CommentResponse
    success: bool = True


class CommentListResponse(BaseModel):
    comments: list[CommentResponse]
