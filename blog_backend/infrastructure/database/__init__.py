from .base import Base
from .session import engine, async_session_factory
from .models import KeyValueModel

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "KeyValueModel",
]
