"""Domain entity for reader comments."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class Comment:
    """A public comment attached to an article.

    The commenter's name is free text; no identity is verified.
    """

    article_id: str
    name: str
    content: str
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
