"""Page resources - dashboard pages and public screens behind the route guard."""

import falcon.asgi

from panela.domain.access import AccessResolver
from panela.domain.value_objects import normalize_route_path


class DashboardPageResource:
    """GET /dashboard[/...] - page context for a route the guard already let through."""

    def __init__(self, resolver: AccessResolver) -> None:
        self._resolver = resolver

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, **params) -> None:
        user = getattr(req.context, "current_user", None)
        if user is None:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        route = normalize_route_path(req.path)
        resp.media = {
            "route": route,
            "user": user.to_dict(),
            "actions": sorted(a.value for a in self._resolver.allowed_actions(user.role, route)),
        }
        resp.status = falcon.HTTP_200


class PublicPageResource:
    """GET on sign-in and unauthorized screens."""

    def __init__(self, page: str) -> None:
        self._page = page

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.media = {
            "page": self._page,
            "redirect_to": req.get_param("redirectTo"),
            "from": req.get_param("from"),
        }
        resp.status = falcon.HTTP_200
