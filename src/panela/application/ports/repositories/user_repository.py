"""User repository port."""

from typing import Protocol
from uuid import UUID

from panela.domain.entities import User


class UserRepository(Protocol):
    """Port for user persistence. Returned users carry their joined role name."""

    async def get_by_id(self, user_id: UUID) -> User | None: ...

    async def get_by_auth_id(self, auth_user_id: str) -> User | None: ...

    async def list_all(self) -> list[User]: ...

    async def update_role(self, user_id: UUID, role_id: UUID) -> None: ...
