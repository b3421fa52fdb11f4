"""Get current user use case - session to user with normalized role."""

from panela.application.dto.current_user import CurrentUser
from panela.application.dto.session import SessionClaims
from panela.application.ports import UnitOfWorkFactory


class GetCurrentUserUseCase:
    """Looks up the user linked to the session's auth subject.

    The user is read on every call, so role changes made through master data
    apply to the next permission check. Inactive users count as signed out.
    """

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def get_current_user(self, session: SessionClaims | None) -> CurrentUser | None:
        """Return the current user, or None if there is no usable session."""
        if session is None or not session.subject:
            return None

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_auth_id(session.subject)

        if user is None or not user.active:
            return None
        return CurrentUser.from_user(user)
