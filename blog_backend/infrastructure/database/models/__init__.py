from .key_value import KeyValueModel

__all__ = [
    "KeyValueModel",
]
