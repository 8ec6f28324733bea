"""In-memory fakes of the ports, shared by unit and integration tests."""

import copy
from collections.abc import Sequence
from datetime import datetime, timedelta, timezone
from typing import Any

from blog_backend.application.interfaces import (
    IdentityProvider,
    KeyValueEntry,
    KeyValueStore,
)
from blog_backend.domain.exceptions import IdentityProviderError


class InMemoryKeyValueStore(KeyValueStore):
    """Dict-backed store. Scans come back in reverse key order to catch
    callers that rely on store ordering."""

    def __init__(self):
        self.data: dict[str, Any] = {}
        self.calls: list[str] = []

    async def get(self, key: str) -> Any | None:
        self.calls.append("get")
        value = self.data.get(key)
        return copy.deepcopy(value)

    async def set(self, key: str, value: Any) -> None:
        self.calls.append("set")
        self.data[key] = copy.deepcopy(value)

    async def delete(self, key: str) -> None:
        self.calls.append("delete")
        self.data.pop(key, None)

    async def delete_many(self, keys: Sequence[str]) -> None:
        self.calls.append("delete_many")
        for key in keys:
            self.data.pop(key, None)

    async def scan_by_prefix(self, prefix: str) -> list[KeyValueEntry]:
        self.calls.append("scan_by_prefix")
        return [
            KeyValueEntry(key=k, value=copy.deepcopy(v))
            for k, v in sorted(self.data.items(), reverse=True)
            if k.startswith(prefix)
        ]

    @property
    def mutations(self) -> list[str]:
        return [c for c in self.calls if c in ("set", "delete", "delete_many")]


class FakeIdentityProvider(IdentityProvider):
    """Resolves tokens from a fixed token → user id table."""

    def __init__(self, tokens: dict[str, str] | None = None):
        self.tokens = tokens if tokens is not None else {"admin-token": "admin-user"}
        self.created_users: list[dict[str, Any]] = []
        self.reject_signup_with: IdentityProviderError | None = None

    @property
    def provider_name(self) -> str:
        return "fake"

    async def resolve_token(self, token: str) -> str | None:
        return self.tokens.get(token)

    async def create_user(self, email: str, password: str, name: str) -> dict[str, Any]:
        if self.reject_signup_with is not None:
            raise self.reject_signup_with
        user = {"id": f"user-{len(self.created_users) + 1}", "email": email,
                "user_metadata": {"name": name}}
        self.created_users.append(user)
        return user


class SteppingClock:
    """Deterministic clock: every call returns a time one second later."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)):
        self.current = start or datetime(2024, 1, 1, tzinfo=timezone.utc)
        self.step = step

    def __call__(self) -> datetime:
        now = self.current
        self.current = self.current + self.step
        return now
