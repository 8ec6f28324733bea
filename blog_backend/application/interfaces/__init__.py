from .key_value_store import KeyValueEntry, KeyValueStore
from .identity_provider import IdentityProvider

__all__ = [
    "KeyValueEntry",
    "KeyValueStore",
    "IdentityProvider",
]
