"""SQLAlchemy ORM model backing the key-value store."""

from typing import Any

from sqlalchemy import JSON, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from blog_backend.infrastructure.database.base import Base


class KeyValueModel(Base):
    """ORM model — maps to the 'kv_store' table (one row per key)."""

    __tablename__ = "kv_store"

    key: Mapped[str] = mapped_column(String(512), primary_key=True)
    value: Mapped[Any] = mapped_column(
        JSON().with_variant(JSONB(), "postgresql"), nullable=False
    )

    def __repr__(self) -> str:
        return f"<KeyValueModel(key='{self.key}')>"
