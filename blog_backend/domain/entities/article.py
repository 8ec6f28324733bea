"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from uuid import uuid4

EXCERPT_LENGTH = 150
EXCERPT_MARKER = "..."


def derive_excerpt(content: str) -> str:
    """First EXCERPT_LENGTH characters of the content plus the ellipsis marker."""
    return content[:EXCERPT_LENGTH] + EXCERPT_MARKER


@dataclass
class Article:
    """Core domain entity representing a published blog article."""

    title: str
    content: str
    excerpt: str
    author_id: str
    id: str = field(default_factory=lambda: str(uuid4()))
    image_url: str | None = None
    video_url: str | None = None
    audio_url: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.updated_at is None:
            self.updated_at = self.created_at

    def update(
        self,
        *,
        now: datetime,
        title: str | None = None,
        content: str | None = None,
        excerpt: str | None = None,
        image_url: str | None = ...,  # type: ignore[assignment]
        video_url: str | None = ...,  # type: ignore[assignment]
        audio_url: str | None = ...,  # type: ignore[assignment]
    ) -> None:
        """Apply a partial update and move updated_at strictly forward.

        Text fields change only when a value is given. Media URLs use the
        ``...`` sentinel so an explicit None clears the field.
        """
        if title is not None:
            self.title = title
        if content is not None:
            self.content = content
        if excerpt is not None:
            self.excerpt = excerpt
        if image_url is not ...:
            self.image_url = image_url
        if video_url is not ...:
            self.video_url = video_url
        if audio_url is not ...:
            self.audio_url = audio_url

        previous = self.updated_at or self.created_at
        if now <= previous:
            now = previous + timedelta(microseconds=1)
        self.updated_at = now
