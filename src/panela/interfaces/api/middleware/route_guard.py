"""Route guard middleware - session routing and page-level access checks."""

from urllib.parse import urlencode

import falcon.asgi

from panela.application.use_cases.auth.validate_route_access import ValidateRouteAccessUseCase
from panela.domain.access import routes
from panela.domain.value_objects import is_route_prefix, normalize_route_path

API_PREFIX = "/v1"


def _redirect(resp: falcon.asgi.Response, location: str) -> None:
    resp.status = falcon.HTTP_302
    resp.location = location
    resp.complete = True


class RouteGuardMiddleware:
    """Redirects page requests according to session state and route permissions.

    * /auth/callback always passes.
    * Signed in on a public route -> /dashboard.
    * Signed out on a protected route -> /sign-in?redirectTo=<path>.
    * / -> /dashboard or /sign-in.
    * Signed in on a protected route the role may not open -> /unauthorized?from=<path>.

    API routes are left to their resources, which answer 401/403 instead.
    Runs after AuthMiddleware.
    """

    def __init__(self, validate_route_access: ValidateRouteAccessUseCase) -> None:
        self._validate_route_access = validate_route_access

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Guard page routes; set req.context.current_user when access is granted."""
        req.context.current_user = None
        path = normalize_route_path(req.path)
        if path == routes.AUTH_CALLBACK or is_route_prefix(API_PREFIX, path):
            return

        session = getattr(req.context, "session", None)
        signed_in = session is not None
        is_public = any(is_route_prefix(p, path) for p in routes.PUBLIC_ROUTES)
        is_protected = any(is_route_prefix(p, path) for p in routes.PROTECTED_PREFIXES)

        if signed_in and is_public:
            _redirect(resp, routes.DASHBOARD)
            return

        if path == routes.HOME:
            _redirect(resp, routes.DASHBOARD if signed_in else routes.SIGN_IN)
            return

        if not is_protected:
            return

        target = f"{path}?{req.query_string}" if req.query_string else path
        if not signed_in:
            _redirect(resp, f"{routes.SIGN_IN}?{urlencode({'redirectTo': target})}")
            return

        # Also taken by sessions with no usable user: /sign-in redirects them to /dashboard.
        result = await self._validate_route_access.execute(path, session)
        if result.allowed:
            req.context.current_user = result.user
        else:
            _redirect(resp, f"{routes.UNAUTHORIZED}?{urlencode({'from': path})}")
