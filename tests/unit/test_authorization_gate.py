"""Unit tests for the AuthorizationGate and AccountService."""

import pytest

from blog_backend.application.schemas import SignupRequest
from blog_backend.application.services import AccountService, AuthorizationGate
from blog_backend.domain.entities import CallerIdentity
from blog_backend.domain.exceptions import IdentityProviderError, ValidationFailedError
from tests.fakes import FakeIdentityProvider


@pytest.fixture
def gate() -> AuthorizationGate:
    return AuthorizationGate(FakeIdentityProvider({"good-token": "user-1"}))


@pytest.mark.asyncio
@pytest.mark.parametrize("header", ["Bearer good-token", "bearer good-token", "  Bearer good-token "])
async def test_resolve_valid_token(gate: AuthorizationGate, header: str):
    assert await gate.resolve(header) == CallerIdentity(user_id="user-1")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "header",
    [None, "", "Bearer", "Bearer ", "Basic good-token", "good-token", "Bearer a b", "Bearer bad-token"],
)
async def test_resolve_rejects(gate: AuthorizationGate, header: str | None):
    assert await gate.resolve(header) is None


def test_extract_token():
    assert AuthorizationGate.extract_token("Bearer abc.def") == "abc.def"
    assert AuthorizationGate.extract_token("Token abc") is None


@pytest.mark.asyncio
async def test_sign_up_delegates_to_provider():
    provider = FakeIdentityProvider()
    service = AccountService(provider)

    user = await service.sign_up(
        SignupRequest(email="admin@example.com", password="s3cret", name="Admin")
    )

    assert user["email"] == "admin@example.com"
    assert provider.created_users == [user]


@pytest.mark.asyncio
async def test_sign_up_requires_all_fields():
    provider = FakeIdentityProvider()
    service = AccountService(provider)

    with pytest.raises(ValidationFailedError):
        await service.sign_up(SignupRequest(email="admin@example.com", password="s3cret"))
    assert provider.created_users == []


@pytest.mark.asyncio
async def test_sign_up_propagates_provider_error():
    provider = FakeIdentityProvider()
    provider.reject_signup_with = IdentityProviderError("fake", 422, "User already registered")
    service = AccountService(provider)

    with pytest.raises(IdentityProviderError) as exc_info:
        await service.sign_up(SignupRequest(email="a@b.c", password="pw", name="A"))
    assert exc_info.value.status_code == 422
