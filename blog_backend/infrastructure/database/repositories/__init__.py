from .key_value_store import SQLAlchemyKeyValueStore

__all__ = [
    "SQLAlchemyKeyValueStore",
]
