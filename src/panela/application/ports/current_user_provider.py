"""Current user provider port - session to user with role."""

from typing import Protocol

from panela.application.dto.current_user import CurrentUser
from panela.application.dto.session import SessionClaims


class CurrentUserProvider(Protocol):
    """Port resolving the user behind a session, read fresh on every call."""

    async def get_current_user(self, session: SessionClaims | None) -> CurrentUser | None: ...
