from dataclasses import dataclass


@dataclass(frozen=True)
class CallerIdentity:
    """Resolved identity of an authenticated caller, scoped to one request."""

    user_id: str
