"""Outcome of a server-side permission validation."""

from dataclasses import dataclass

from panela.application.dto.current_user import CurrentUser

NOT_AUTHENTICATED = "not authenticated"
SESSION_LOOKUP_FAILED = "session lookup failed"
NO_ROLE_ASSIGNED = "no role assigned"
INSUFFICIENT_PERMISSIONS = "insufficient permissions"


@dataclass(frozen=True)
class ValidationResult:
    """allowed is the verdict; error says why not, user is set once resolved."""

    allowed: bool
    user: CurrentUser | None = None
    error: str | None = None

    @property
    def authenticated(self) -> bool:
        return self.user is not None

    def to_dict(self) -> dict:
        return {
            "allowed": self.allowed,
            "error": self.error,
            "user": self.user.to_dict() if self.user else None,
        }
