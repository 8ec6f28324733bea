"""Application service for provisioning admin accounts."""

import logging
from typing import Any

from blog_backend.application.interfaces import IdentityProvider
from blog_backend.application.schemas import SignupRequest
from blog_backend.domain.exceptions import ValidationFailedError

logger = logging.getLogger(__name__)


class AccountService:
    """Creates accounts through the identity provider. Used for initial admin setup."""

    def __init__(self, identity_provider: IdentityProvider):
        self._identity_provider = identity_provider

    async def sign_up(self, data: SignupRequest) -> dict[str, Any]:
        if not data.email or not data.password or not data.name:
            raise ValidationFailedError("Email, password, and name are required")

        user = await self._identity_provider.create_user(
            email=data.email,
            password=data.password,
            name=data.name,
        )
        logger.info("Provisioned account %s", user.get("id"))
        return user
