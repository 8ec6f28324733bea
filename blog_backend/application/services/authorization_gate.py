"""Authorization gate — resolves a bearer credential to a caller identity."""

import logging

from blog_backend.application.interfaces import IdentityProvider
from blog_backend.domain.entities import CallerIdentity

logger = logging.getLogger(__name__)

_BEARER_SCHEME = "bearer"


class AuthorizationGate:
    """Guards mutating operations.

    ``resolve`` returns None ("rejected") for a missing or malformed
    ``Authorization`` header and for tokens the identity provider refuses.
    """

    def __init__(self, identity_provider: IdentityProvider):
        self._identity_provider = identity_provider

    @staticmethod
    def extract_token(authorization: str | None) -> str | None:
        """Return the token of a ``Bearer <token>`` header value, or None."""
        if not authorization:
            return None
        parts = authorization.strip().split()
        if len(parts) != 2 or parts[0].lower() != _BEARER_SCHEME:
            return None
        return parts[1]

    async def resolve(self, authorization: str | None) -> CallerIdentity | None:
        token = self.extract_token(authorization)
        if token is None:
            return None

        user_id = await self._identity_provider.resolve_token(token)
        if not user_id:
            logger.debug(
                "Credential rejected by %s", self._identity_provider.provider_name
            )
            return None
        return CallerIdentity(user_id=user_id)
