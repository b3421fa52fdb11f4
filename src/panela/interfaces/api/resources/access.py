"""Access API resources - what the current user may see and do."""

import falcon.asgi

from panela.application.use_cases.auth.describe_access import DescribeAccessUseCase
from panela.application.use_cases.auth.validate_action_permission import (
    ValidateActionPermissionUseCase,
)
from panela.application.use_cases.auth.validate_route_access import ValidateRouteAccessUseCase


class AccessResource:
    """GET /v1/access - role, visible navigation and allowed actions per route."""

    def __init__(self, describe_access: DescribeAccessUseCase) -> None:
        self._describe = describe_access

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        session = getattr(req.context, "session", None)
        description = await self._describe.execute(session)
        if description is None:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        resp.media = description.to_dict()
        resp.status = falcon.HTTP_200


class AccessCheckResource:
    """POST /v1/access/check - validate {route, action?} for the current user."""

    def __init__(
        self,
        validate_route_access: ValidateRouteAccessUseCase,
        validate_action_permission: ValidateActionPermissionUseCase,
    ) -> None:
        self._validate_route = validate_route_access
        self._validate_action = validate_action_permission

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        try:
            body = await req.get_media()
            route = body["route"]
            action = body.get("action")
        except (KeyError, TypeError, AttributeError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        if not isinstance(route, str) or (action is not None and not isinstance(action, str)):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "route and action must be strings"}
            return

        session = getattr(req.context, "session", None)
        if action:
            result = await self._validate_action.execute(route, action, session)
        else:
            result = await self._validate_route.execute(route, session)

        resp.media = result.to_dict()
        resp.status = falcon.HTTP_200
