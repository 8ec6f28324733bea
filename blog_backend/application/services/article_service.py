"""Application service (use case) for Article operations.

Articles live in the key-value store under ``article:<id>``; deleting an
article cascades to every ``comment:<id>:*`` key.
"""

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from blog_backend.application.interfaces import KeyValueStore
from blog_backend.application.schemas import ArticleCreate, ArticleUpdate
from blog_backend.application.services.key_space import (
    ARTICLE_PREFIX,
    article_key,
    comment_prefix,
)
from blog_backend.domain.entities import Article, CallerIdentity, derive_excerpt
from blog_backend.domain.exceptions import (
    EntityNotFoundError,
    UnauthorizedError,
    ValidationFailedError,
)

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def article_to_record(article: Article) -> dict[str, Any]:
    """Map domain entity → stored record (same shape as the wire format)."""
    return {
        "id": article.id,
        "title": article.title,
        "content": article.content,
        "excerpt": article.excerpt,
        "imageUrl": article.image_url,
        "videoUrl": article.video_url,
        "audioUrl": article.audio_url,
        "authorId": article.author_id,
        "createdAt": article.created_at.isoformat(),
        "updatedAt": article.updated_at.isoformat(),
    }


def record_to_article(record: dict[str, Any]) -> Article:
    """Map stored record → domain entity."""
    return Article(
        id=record["id"],
        title=record["title"],
        content=record["content"],
        excerpt=record.get("excerpt") or "",
        image_url=record.get("imageUrl"),
        video_url=record.get("videoUrl"),
        audio_url=record.get("audioUrl"),
        author_id=record["authorId"],
        created_at=datetime.fromisoformat(record["createdAt"]),
        updated_at=datetime.fromisoformat(record["updatedAt"]),
    )


class ArticleService:
    """Orchestrates article business logic. Depends on the key-value store port (DI)."""

    def __init__(self, store: KeyValueStore, clock: Clock = utc_now):
        self._store = store
        self._clock = clock

    async def list_articles(self) -> list[Article]:
        """All articles, newest first. Equal timestamps order by id, descending."""
        entries = await self._store.scan_by_prefix(ARTICLE_PREFIX)
        articles = [record_to_article(entry.value) for entry in entries]
        articles.sort(key=lambda a: (a.created_at, a.id), reverse=True)
        return articles

    async def get_article(self, article_id: str) -> Article:
        record = await self._store.get(article_key(article_id))
        if record is None:
            raise EntityNotFoundError("Article", article_id)
        return record_to_article(record)

    async def create_article(
        self, data: ArticleCreate, identity: CallerIdentity | None
    ) -> Article:
        if identity is None:
            raise UnauthorizedError()
        if _is_blank(data.title) or _is_blank(data.content):
            raise ValidationFailedError("Title and content are required")

        now = self._clock()
        article = Article(
            title=data.title,
            content=data.content,
            excerpt=data.excerpt if not _is_blank(data.excerpt) else derive_excerpt(data.content),
            image_url=data.image_url or None,
            video_url=data.video_url or None,
            audio_url=data.audio_url or None,
            author_id=identity.user_id,
            created_at=now,
            updated_at=now,
        )
        await self._store.set(article_key(article.id), article_to_record(article))
        logger.info("Created article %s by %s", article.id, identity.user_id)
        return article

    async def update_article(
        self, article_id: str, data: ArticleUpdate, identity: CallerIdentity | None
    ) -> Article:
        if identity is None:
            raise UnauthorizedError()
        article = await self.get_article(article_id)

        for field_name in ("title", "content"):
            value = getattr(data, field_name)
            if value is not None and _is_blank(value):
                raise ValidationFailedError(f"{field_name.capitalize()} cannot be empty")

        # Media URLs overwrite whenever the key was sent, even as null / ""
        kwargs: dict[str, Any] = {}
        for field_name in ("image_url", "video_url", "audio_url"):
            if field_name in data.model_fields_set:
                kwargs[field_name] = getattr(data, field_name)

        article.update(
            now=self._clock(),
            title=data.title,
            content=data.content,
            excerpt=data.excerpt,
            **kwargs,
        )
        await self._store.set(article_key(article.id), article_to_record(article))
        logger.info("Updated article %s by %s", article.id, identity.user_id)
        return article

    async def delete_article(self, article_id: str, identity: CallerIdentity | None) -> None:
        """Delete the article, then every comment stored under its prefix.

        The two store calls are independent: a comment created between them
        can outlive its article.
        """
        if identity is None:
            raise UnauthorizedError()
        key = article_key(article_id)
        if await self._store.get(key) is None:
            raise EntityNotFoundError("Article", article_id)

        await self._store.delete(key)

        comments = await self._store.scan_by_prefix(comment_prefix(article_id))
        comment_keys = [entry.key for entry in comments]
        if comment_keys:
            await self._store.delete_many(comment_keys)

        logger.info(
            "Deleted article %s and %d comment(s) by %s",
            article_id,
            len(comment_keys),
            identity.user_id,
        )
