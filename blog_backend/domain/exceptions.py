"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ValidationFailedError(Exception):
    """Raised when required fields are missing or malformed. Nothing is persisted."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UnauthorizedError(Exception):
    """Raised when a mutating operation is attempted without a resolved identity."""

    def __init__(self, message: str = "Unauthorized - Please log in"):
        self.message = message
        super().__init__(message)


class StorageError(Exception):
    """Raised when the underlying key-value store fails an operation.

    Not retried by the content layer; surfaced as a generic server error.
    """

    def __init__(self, operation: str, key: str, cause: Exception | None = None):
        self.operation = operation
        self.key = key
        self.cause = cause
        super().__init__(f"Key-value store '{operation}' failed for '{key}'")


class IdentityProviderError(Exception):
    """Raised when the identity provider rejects an account operation.

    Provider-agnostic — works for Supabase Auth or any other backend.
    """

    def __init__(self, provider: str, status_code: int, message: str):
        self.provider = provider
        self.status_code = status_code
        self.message = message
        super().__init__(f"[{provider}] {status_code}: {message}")
