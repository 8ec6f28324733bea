"""Abstract key-value store interface (port) — the only persistence contract."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


@dataclass
class KeyValueEntry:
    """A single key/value pair returned by a prefix scan."""

    key: str
    value: Any


class KeyValueStore(ABC):
    """Port for a flat string-keyed store of JSON-compatible values.

    Each call is atomic on its own; nothing spans calls.
    """

    @abstractmethod
    async def get(self, key: str) -> Any | None:
        """Return the value stored under key, or None when absent."""
        ...

    @abstractmethod
    async def set(self, key: str, value: Any) -> None:
        """Insert or overwrite the value stored under key."""
        ...

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove key. Deleting an absent key is not an error."""
        ...

    @abstractmethod
    async def delete_many(self, keys: Sequence[str]) -> None:
        """Remove every key in one call. An empty sequence is a no-op."""
        ...

    @abstractmethod
    async def scan_by_prefix(self, prefix: str) -> list[KeyValueEntry]:
        """Return all entries whose key starts with prefix, in no particular order."""
        ...
