"""Identity provider infrastructure package."""

from .supabase_identity_provider import SupabaseIdentityProvider

__all__ = ["SupabaseIdentityProvider"]
