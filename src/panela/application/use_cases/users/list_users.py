"""List users and roles use cases - master data administration."""

from panela.application.dto.session import SessionClaims
from panela.application.ports import UnitOfWorkFactory
from panela.application.use_cases.auth.validate_action_permission import (
    ValidateActionPermissionUseCase,
)
from panela.domain.access.routes import MASTER_DATA_USERS
from panela.domain.entities import Role, User
from panela.domain.exceptions import PermissionDenied
from panela.domain.value_objects import Action


class ListUsersUseCase:
    """List users. Requires view on the users master-data section."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        validate_action: ValidateActionPermissionUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._validate_action = validate_action

    async def execute(self, session: SessionClaims | None) -> list[User]:
        validation = await self._validate_action.execute(MASTER_DATA_USERS, Action.VIEW, session)
        if not validation.allowed:
            raise PermissionDenied(validation.error)

        async with self._uow_factory() as uow:
            return await uow.users.list_all()


class ListRolesUseCase:
    """List roles that can be assigned. Same permission as listing users."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        validate_action: ValidateActionPermissionUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._validate_action = validate_action

    async def execute(self, session: SessionClaims | None) -> list[Role]:
        validation = await self._validate_action.execute(MASTER_DATA_USERS, Action.VIEW, session)
        if not validation.allowed:
            raise PermissionDenied(validation.error)

        async with self._uow_factory() as uow:
            roles = await uow.roles.list_all()
        return sorted(roles, key=lambda r: r.name)
