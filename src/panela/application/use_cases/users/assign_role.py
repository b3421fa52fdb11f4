"""Assign role use case - change the single role a user holds."""

from uuid import UUID

from panela.application.dto.session import SessionClaims
from panela.application.ports import UnitOfWorkFactory
from panela.application.use_cases.auth.validate_action_permission import (
    ValidateActionPermissionUseCase,
)
from panela.domain.access.routes import MASTER_DATA_USERS
from panela.domain.entities import User
from panela.domain.exceptions import NotFound, PermissionDenied, ValidationError
from panela.domain.value_objects import Action, normalize_role
from panela.log import get_logger

logger = get_logger(__name__)


class AssignUserRoleUseCase:
    """Assign a role to a user. Actor needs update on the users master-data section.

    The new role applies on the user's next permission check.
    """

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        validate_action: ValidateActionPermissionUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._validate_action = validate_action

    async def execute(
        self,
        session: SessionClaims | None,
        user_id: UUID,
        role_name: str,
    ) -> User:
        validation = await self._validate_action.execute(
            MASTER_DATA_USERS, Action.UPDATE, session
        )
        if not validation.allowed:
            raise PermissionDenied(validation.error)

        role_value = normalize_role(role_name)
        if role_value is None:
            raise ValidationError(f"Unknown role: {role_name}")

        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_name(role_value.value)
            if not role:
                raise NotFound("Role", role_value.value)

            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", str(user_id))

            await uow.users.update_role(user.id, role.id)
            updated = await uow.users.get_by_id(user.id)

        logger.info(
            "user_role_assigned",
            user_id=str(user_id),
            role=role.name,
            previous_role=user.role_name,
            actor_id=validation.user.id,
        )
        return updated
