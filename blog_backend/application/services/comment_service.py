"""Application service (use case) for Comment operations."""

import logging
from datetime import datetime
from typing import Any

from blog_backend.application.interfaces import KeyValueStore
from blog_backend.application.schemas import CommentCreate
from blog_backend.application.services.article_service import Clock, utc_now
from blog_backend.application.services.key_space import (
    article_key,
    comment_key,
    comment_prefix,
)
from blog_backend.domain.entities import CallerIdentity, Comment
from blog_backend.domain.exceptions import (
    EntityNotFoundError,
    UnauthorizedError,
    ValidationFailedError,
)

logger = logging.getLogger(__name__)


def comment_to_record(comment: Comment) -> dict[str, Any]:
    return {
        "id": comment.id,
        "articleId": comment.article_id,
        "name": comment.name,
        "content": comment.content,
        "createdAt": comment.created_at.isoformat(),
    }


def record_to_comment(record: dict[str, Any]) -> Comment:
    return Comment(
        id=record["id"],
        article_id=record["articleId"],
        name=record["name"],
        content=record["content"],
        created_at=datetime.fromisoformat(record["createdAt"]),
    )


class CommentService:
    """Public commenting and admin moderation on top of the key-value store."""

    def __init__(self, store: KeyValueStore, clock: Clock = utc_now):
        self._store = store
        self._clock = clock

    async def list_comments(self, article_id: str) -> list[Comment]:
        """Comments of one article, oldest first. Equal timestamps order by id."""
        entries = await self._store.scan_by_prefix(comment_prefix(article_id))
        comments = [record_to_comment(entry.value) for entry in entries]
        comments.sort(key=lambda c: (c.created_at, c.id))
        return comments

    async def create_comment(self, article_id: str, data: CommentCreate) -> Comment:
        """Post a comment. No identity is required."""
        if not data.name or not data.name.strip() or not data.content or not data.content.strip():
            raise ValidationFailedError("Name and content are required")

        if await self._store.get(article_key(article_id)) is None:
            raise EntityNotFoundError("Article", article_id)

        comment = Comment(
            article_id=article_id,
            name=data.name,
            content=data.content,
            created_at=self._clock(),
        )
        await self._store.set(comment_key(article_id, comment.id), comment_to_record(comment))
        logger.info("Created comment %s on article %s", comment.id, article_id)
        return comment

    async def delete_comment(
        self, article_id: str, comment_id: str, identity: CallerIdentity | None
    ) -> None:
        if identity is None:
            raise UnauthorizedError()
        key = comment_key(article_id, comment_id)
        if await self._store.get(key) is None:
            raise EntityNotFoundError("Comment", comment_id)

        await self._store.delete(key)
        logger.info(
            "Deleted comment %s on article %s by %s", comment_id, article_id, identity.user_id
        )
