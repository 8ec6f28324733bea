"""Supabase Auth client — implements the IdentityProvider interface.

Talks to the GoTrue REST API exposed by Supabase using httpx:

 - ``GET  /auth/v1/user``         resolve a user access token
 - ``POST /auth/v1/admin/users``  create a confirmed account (service role)
"""

import logging
from typing import Any

import httpx

from blog_backend.application.interfaces import IdentityProvider
from blog_backend.domain.exceptions import IdentityProviderError

logger = logging.getLogger(__name__)


class SupabaseIdentityProvider(IdentityProvider):
    """Infrastructure adapter — connects to Supabase Auth.

    An injected ``httpx.AsyncClient`` is reused and left open; otherwise a
    short-lived client is created per call.
    """

    def __init__(
        self,
        base_url: str,
        service_role_key: str,
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._service_role_key = service_role_key
        self._timeout = timeout
        self._http_client = http_client

    @property
    def provider_name(self) -> str:
        return "supabase"

    def _get_headers(self, bearer: str) -> dict[str, str]:
        return {
            "apikey": self._service_role_key,
            "Authorization": f"Bearer {bearer}",
            "Content-Type": "application/json",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def resolve_token(self, token: str) -> str | None:
        url = f"{self._base_url}/auth/v1/user"
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.get(url, headers=self._get_headers(token))
        except httpx.HTTPError as e:
            logger.warning("Token verification request failed: %s", e)
            return None
        finally:
            if should_close:
                await client.aclose()

        if response.status_code != 200:
            logger.warning("Token rejected by Supabase (status %d)", response.status_code)
            return None

        try:
            data = response.json()
        except ValueError:
            logger.warning("Supabase returned a non-JSON user payload")
            return None
        if not isinstance(data, dict):
            logger.warning("Supabase returned a user payload that is not an object")
            return None
        user_id = data.get("id")
        return user_id or None

    async def create_user(self, email: str, password: str, name: str) -> dict[str, Any]:
        url = f"{self._base_url}/auth/v1/admin/users"
        payload = {
            "email": email,
            "password": password,
            "user_metadata": {"name": name},
            # No mail server is configured, so accounts are confirmed up front
            "email_confirm": True,
        }
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.post(
                url, headers=self._get_headers(self._service_role_key), json=payload
            )
        except httpx.HTTPError as e:
            raise IdentityProviderError(
                provider=self.provider_name, status_code=502, message=str(e)
            ) from e
        finally:
            if should_close:
                await client.aclose()

        if response.status_code not in (200, 201):
            self._raise_provider_error(response)

        return response.json()

    def _raise_provider_error(self, response: httpx.Response) -> None:
        """Extract error details from a GoTrue response and raise IdentityProviderError."""
        try:
            data = response.json()
            message = data.get("msg") or data.get("message") or data.get("error_description") or response.text
        except Exception:
            message = response.text

        raise IdentityProviderError(
            provider=self.provider_name,
            status_code=response.status_code,
            message=message,
        )
