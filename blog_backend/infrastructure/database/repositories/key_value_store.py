"""Concrete key-value store backed by a single SQLAlchemy table."""

import logging
from collections.abc import Sequence
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from blog_backend.application.interfaces import KeyValueEntry, KeyValueStore
from blog_backend.domain.exceptions import StorageError
from blog_backend.infrastructure.database.models import KeyValueModel

logger = logging.getLogger(__name__)


class SQLAlchemyKeyValueStore(KeyValueStore):
    """Implements the KeyValueStore port on the 'kv_store' table.

    Every call opens its own session and commits before returning, so calls
    are individually atomic and never share a transaction.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def get(self, key: str) -> Any | None:
        try:
            async with self._session_factory() as session:
                model = await session.get(KeyValueModel, key)
                return model.value if model else None
        except SQLAlchemyError as e:
            logger.exception("kv get failed for %s", key)
            raise StorageError("get", key, e) from e

    async def set(self, key: str, value: Any) -> None:
        try:
            async with self._session_factory.begin() as session:
                await session.merge(KeyValueModel(key=key, value=value))
        except SQLAlchemyError as e:
            logger.exception("kv set failed for %s", key)
            raise StorageError("set", key, e) from e

    async def delete(self, key: str) -> None:
        try:
            async with self._session_factory.begin() as session:
                await session.execute(delete(KeyValueModel).where(KeyValueModel.key == key))
        except SQLAlchemyError as e:
            logger.exception("kv delete failed for %s", key)
            raise StorageError("delete", key, e) from e

    async def delete_many(self, keys: Sequence[str]) -> None:
        if not keys:
            return
        try:
            async with self._session_factory.begin() as session:
                await session.execute(
                    delete(KeyValueModel).where(KeyValueModel.key.in_(list(keys)))
                )
        except SQLAlchemyError as e:
            logger.exception("kv delete_many failed for %d key(s)", len(keys))
            raise StorageError("delete_many", ", ".join(keys), e) from e

    async def scan_by_prefix(self, prefix: str) -> list[KeyValueEntry]:
        stmt = select(KeyValueModel).where(
            KeyValueModel.key.startswith(prefix, autoescape=True)
        )
        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                # SQLite's LIKE ignores ASCII case; re-check to keep scans exact
                return [
                    KeyValueEntry(key=row.key, value=row.value)
                    for row in result.scalars().all()
                    if row.key.startswith(prefix)
                ]
        except SQLAlchemyError as e:
            logger.exception("kv prefix scan failed for %s", prefix)
            raise StorageError("scan_by_prefix", prefix, e) from e
