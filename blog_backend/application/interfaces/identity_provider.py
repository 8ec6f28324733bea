"""Abstract identity provider interface (port) — bearer token resolution and account provisioning."""

from abc import ABC, abstractmethod
from typing import Any


class IdentityProvider(ABC):
    """Port for the external identity service (e.g. Supabase Auth)."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Unique name of this provider (e.g. 'supabase')."""
        ...

    @abstractmethod
    async def resolve_token(self, token: str) -> str | None:
        """Resolve a bearer token to a user id, or None if the provider rejects it."""
        ...

    @abstractmethod
    async def create_user(self, email: str, password: str, name: str) -> dict[str, Any]:
        """Provision a confirmed account and return the provider's user record.

        Raises:
            IdentityProviderError: If the provider refuses the account.
        """
        ...
