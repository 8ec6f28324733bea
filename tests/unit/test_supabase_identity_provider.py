"""Unit tests for the SupabaseIdentityProvider."""

import json

import httpx
import pytest

from blog_backend.domain.exceptions import IdentityProviderError
from blog_backend.infrastructure.identity import SupabaseIdentityProvider


# ── Helpers ──


def _make_mock_transport(
    status_code: int = 200,
    response_data: dict | None = None,
    seen: list[httpx.Request] | None = None,
) -> httpx.MockTransport:
    """Create a mock transport that returns a fixed response and records requests."""

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, json=response_data or {})

    return httpx.MockTransport(handler)


def _provider(transport: httpx.MockTransport) -> SupabaseIdentityProvider:
    return SupabaseIdentityProvider(
        base_url="https://project.supabase.co/",
        service_role_key="service-key",
        http_client=httpx.AsyncClient(transport=transport),
    )


# ── Tests ──


@pytest.mark.asyncio
async def test_resolve_token_returns_user_id():
    seen: list[httpx.Request] = []
    provider = _provider(_make_mock_transport(200, {"id": "user-42", "email": "a@b.c"}, seen))

    assert await provider.resolve_token("access-token") == "user-42"

    request = seen[0]
    assert request.method == "GET"
    assert str(request.url) == "https://project.supabase.co/auth/v1/user"
    assert request.headers["Authorization"] == "Bearer access-token"
    assert request.headers["apikey"] == "service-key"


@pytest.mark.asyncio
async def test_resolve_token_rejected():
    provider = _provider(_make_mock_transport(401, {"msg": "invalid JWT"}))
    assert await provider.resolve_token("expired") is None


@pytest.mark.asyncio
async def test_resolve_token_without_id():
    provider = _provider(_make_mock_transport(200, {"email": "a@b.c"}))
    assert await provider.resolve_token("token") is None


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [["not", "an", "object"], "user-42", 42, None])
async def test_resolve_token_non_object_payload(body):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=body)

    provider = _provider(httpx.MockTransport(handler))
    assert await provider.resolve_token("token") is None


@pytest.mark.asyncio
async def test_resolve_token_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    provider = _provider(httpx.MockTransport(handler))
    assert await provider.resolve_token("token") is None


@pytest.mark.asyncio
async def test_create_user_sends_confirmed_account():
    seen: list[httpx.Request] = []
    provider = _provider(
        _make_mock_transport(200, {"id": "user-1", "email": "admin@example.com"}, seen)
    )

    user = await provider.create_user("admin@example.com", "s3cret", "Admin")

    assert user["id"] == "user-1"
    request = seen[0]
    assert request.method == "POST"
    assert str(request.url) == "https://project.supabase.co/auth/v1/admin/users"
    assert request.headers["Authorization"] == "Bearer service-key"
    assert json.loads(request.content) == {
        "email": "admin@example.com",
        "password": "s3cret",
        "user_metadata": {"name": "Admin"},
        "email_confirm": True,
    }


@pytest.mark.asyncio
async def test_create_user_error_handling():
    provider = _provider(_make_mock_transport(422, {"msg": "User already registered"}))

    with pytest.raises(IdentityProviderError) as exc_info:
        await provider.create_user("admin@example.com", "s3cret", "Admin")

    assert exc_info.value.status_code == 422
    assert "already registered" in exc_info.value.message
