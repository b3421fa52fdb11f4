"""Shared first step of the permission validators: resolve the session user."""

from panela.application.dto.session import SessionClaims
from panela.application.dto.validation_result import (
    NO_ROLE_ASSIGNED,
    NOT_AUTHENTICATED,
    SESSION_LOOKUP_FAILED,
    ValidationResult,
)
from panela.application.ports import CurrentUserProvider
from panela.log import get_logger

logger = get_logger(__name__)


async def resolve_session_user(
    provider: CurrentUserProvider, session: SessionClaims | None
) -> ValidationResult:
    """allowed=True with the user if the session maps to a user holding a role.

    Otherwise the denial to return as is. Lookup errors are logged and turned
    into a denial so callers only ever branch on allowed.
    """
    if session is None:
        return ValidationResult(allowed=False, error=NOT_AUTHENTICATED)

    try:
        user = await provider.get_current_user(session)
    except Exception:
        logger.exception("session_lookup_failed", subject=session.subject)
        return ValidationResult(allowed=False, error=SESSION_LOOKUP_FAILED)

    if user is None:
        return ValidationResult(allowed=False, error=NOT_AUTHENTICATED)
    if user.role is None:
        logger.info("user_without_role", user_id=user.id, stored_role=user.user.role_name)
        return ValidationResult(allowed=False, user=user, error=NO_ROLE_ASSIGNED)
    return ValidationResult(allowed=True, user=user)
