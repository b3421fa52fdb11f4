"""Validate route access use case - page guards."""

from panela.application.dto.session import SessionClaims
from panela.application.dto.validation_result import INSUFFICIENT_PERMISSIONS, ValidationResult
from panela.application.ports import CurrentUserProvider
from panela.application.use_cases.auth.session_user import resolve_session_user
from panela.domain.access import AccessResolver
from panela.log import get_logger

logger = get_logger(__name__)


class ValidateRouteAccessUseCase:
    """Check whether the session's user may open a route."""

    def __init__(
        self,
        current_user_provider: CurrentUserProvider,
        resolver: AccessResolver,
    ) -> None:
        self._current_user_provider = current_user_provider
        self._resolver = resolver

    async def execute(self, route: str, session: SessionClaims | None) -> ValidationResult:
        """Resolve the user, then ask the resolver. Never raises."""
        result = await resolve_session_user(self._current_user_provider, session)
        if not result.allowed:
            return result

        user = result.user
        if not self._resolver.can_access_route(user.role, route):
            logger.info("route_access_denied", route=route, user_id=user.id, role=user.role)
            return ValidationResult(allowed=False, user=user, error=INSUFFICIENT_PERMISSIONS)
        return result
