"""Users and roles API resources - master data role administration."""

from uuid import UUID

import falcon.asgi

from panela.application.dto.validation_result import NOT_AUTHENTICATED
from panela.application.use_cases.users.assign_role import AssignUserRoleUseCase
from panela.application.use_cases.users.list_users import ListRolesUseCase, ListUsersUseCase
from panela.domain.entities import Role, User
from panela.domain.exceptions import NotFound, PermissionDenied, ValidationError


def _user_media(user: User) -> dict:
    return {
        "id": str(user.id),
        "name": user.name,
        "email": user.email,
        "phone": user.phone,
        "role": user.role_name,
        "cost_center": user.cost_center_name,
        "active": user.active,
        "created_at": user.created_at.isoformat(),
        "updated_at": user.updated_at.isoformat(),
    }


def _role_media(role: Role) -> dict:
    return {"id": str(role.id), "name": role.name, "description": role.description}


def _deny(resp: falcon.asgi.Response, error: PermissionDenied) -> None:
    if str(error) == NOT_AUTHENTICATED:
        resp.status = falcon.HTTP_401
        resp.media = {"error": "Unauthorized"}
    else:
        resp.status = falcon.HTTP_403
        resp.media = {"error": "Permission denied"}


class UsersResource:
    """GET /v1/users - list users."""

    def __init__(self, list_users: ListUsersUseCase) -> None:
        self._list_users = list_users

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        session = getattr(req.context, "session", None)
        try:
            users = await self._list_users.execute(session)
        except PermissionDenied as e:
            _deny(resp, e)
            return

        resp.media = {"items": [_user_media(u) for u in users]}
        resp.status = falcon.HTTP_200


class RolesResource:
    """GET /v1/roles - list assignable roles."""

    def __init__(self, list_roles: ListRolesUseCase) -> None:
        self._list_roles = list_roles

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        session = getattr(req.context, "session", None)
        try:
            roles = await self._list_roles.execute(session)
        except PermissionDenied as e:
            _deny(resp, e)
            return

        resp.media = {"items": [_role_media(r) for r in roles]}
        resp.status = falcon.HTTP_200


class UserRoleResource:
    """PUT /v1/users/{user_id}/role - assign role {"role": name}."""

    def __init__(self, assign_role: AssignUserRoleUseCase) -> None:
        self._assign = assign_role

    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
    ) -> None:
        try:
            uid = UUID(user_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid user ID"}
            return

        try:
            body = await req.get_media()
            role = body["role"]
        except (KeyError, TypeError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        if not isinstance(role, str):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "role must be a string"}
            return

        session = getattr(req.context, "session", None)
        try:
            user = await self._assign.execute(session, uid, role)
        except PermissionDenied as e:
            _deny(resp, e)
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return

        resp.media = _user_media(user)
        resp.status = falcon.HTTP_200
