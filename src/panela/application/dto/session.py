"""Session claims of an authenticated request."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SessionClaims:
    """Identity asserted by the auth provider for a valid token."""

    subject: str
    email: str | None = None
    username: str | None = None
