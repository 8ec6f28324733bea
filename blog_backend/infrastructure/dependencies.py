"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Header, HTTPException, status

from blog_backend.config import get_settings
from blog_backend.application.interfaces import IdentityProvider, KeyValueStore
from blog_backend.application.services import (
    AccountService,
    ArticleService,
    AuthorizationGate,
    CommentService,
)
from blog_backend.domain.entities import CallerIdentity
from blog_backend.domain.exceptions import UnauthorizedError
from blog_backend.infrastructure.database.repositories import SQLAlchemyKeyValueStore
from blog_backend.infrastructure.database.session import async_session_factory
from blog_backend.infrastructure.identity import SupabaseIdentityProvider


def get_key_value_store() -> KeyValueStore:
    """Provides the key-value store; each call on it runs its own transaction."""
    return SQLAlchemyKeyValueStore(async_session_factory)


def get_identity_provider() -> IdentityProvider:
    """Provides the Supabase Auth adapter configured from settings."""
    settings = get_settings()
    return SupabaseIdentityProvider(
        base_url=settings.supabase_url,
        service_role_key=settings.supabase_service_role_key,
        timeout=settings.identity_timeout_seconds,
    )


async def get_article_service(
    store: KeyValueStore = Depends(get_key_value_store),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its store wired up."""
    yield ArticleService(store)


async def get_comment_service(
    store: KeyValueStore = Depends(get_key_value_store),
) -> AsyncGenerator[CommentService, None]:
    """Provides a CommentService instance with its store wired up."""
    yield CommentService(store)


async def get_account_service(
    provider: IdentityProvider = Depends(get_identity_provider),
) -> AsyncGenerator[AccountService, None]:
    yield AccountService(provider)


async def get_authorization_gate(
    provider: IdentityProvider = Depends(get_identity_provider),
) -> AsyncGenerator[AuthorizationGate, None]:
    yield AuthorizationGate(provider)


async def get_caller_identity(
    authorization: str | None = Header(None),
    gate: AuthorizationGate = Depends(get_authorization_gate),
) -> CallerIdentity | None:
    """Resolve the request's bearer credential. None means rejected.

    Services decide whether an identity is required, so public endpoints
    simply do not depend on this.
    """
    return await gate.resolve(authorization)


async def require_caller_identity(
    identity: CallerIdentity | None = Depends(get_caller_identity),
) -> CallerIdentity:
    """Reject the request with 401 before its body is validated.

    FastAPI solves dependencies ahead of body validation, so an
    unauthenticated caller never sees a payload error on guarded routes.
    """
    if identity is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=UnauthorizedError().message
        )
    return identity
