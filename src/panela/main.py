"""Application entry point and composition root."""

import falcon
import falcon.asgi

from panela import __version__
from panela.application.ports import UnitOfWorkFactory
from panela.application.use_cases.auth.describe_access import DescribeAccessUseCase
from panela.application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from panela.application.use_cases.auth.validate_action_permission import (
    ValidateActionPermissionUseCase,
)
from panela.application.use_cases.auth.validate_route_access import ValidateRouteAccessUseCase
from panela.application.use_cases.users.assign_role import AssignUserRoleUseCase
from panela.application.use_cases.users.list_users import ListRolesUseCase, ListUsersUseCase
from panela.config import Settings, get_settings
from panela.domain.access import AccessResolver, routes
from panela.infrastructure.auth.keycloak_provider import KeycloakProvider
from panela.infrastructure.persistence.postgres.connection import create_pool
from panela.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from panela.infrastructure.policy.default_policy import NAVIGATION, build_default_policy
from panela.interfaces.api.middleware.auth import AuthMiddleware
from panela.interfaces.api.middleware.cors import CORSMiddleware
from panela.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from panela.interfaces.api.middleware.route_guard import RouteGuardMiddleware
from panela.interfaces.api.resources.access import AccessCheckResource, AccessResource
from panela.interfaces.api.resources.health import HealthResource
from panela.interfaces.api.resources.pages import DashboardPageResource, PublicPageResource
from panela.interfaces.api.resources.users import (
    RolesResource,
    UserRoleResource,
    UsersResource,
)
from panela.log import configure_logging, get_logger

logger = get_logger(__name__)


def main() -> None:
    """CLI entry point."""
    print(f"Panela v{__version__}")


def add_routes(
    app: falcon.asgi.App,
    uow_factory: UnitOfWorkFactory,
    resolver: AccessResolver,
    current_user_provider,
) -> None:
    """Wire use cases and resources onto app."""
    validate_route_access = ValidateRouteAccessUseCase(current_user_provider, resolver)
    validate_action_permission = ValidateActionPermissionUseCase(current_user_provider, resolver)
    describe_access = DescribeAccessUseCase(current_user_provider, resolver, NAVIGATION)
    list_users = ListUsersUseCase(uow_factory, validate_action_permission)
    list_roles = ListRolesUseCase(uow_factory, validate_action_permission)
    assign_role = AssignUserRoleUseCase(uow_factory, validate_action_permission)

    health_resource = HealthResource(uow_factory)
    dashboard_resource = DashboardPageResource(resolver)

    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/access", AccessResource(describe_access))
    app.add_route(
        "/v1/access/check",
        AccessCheckResource(validate_route_access, validate_action_permission),
    )
    app.add_route("/v1/roles", RolesResource(list_roles))
    app.add_route("/v1/users", UsersResource(list_users))
    app.add_route("/v1/users/{user_id}/role", UserRoleResource(assign_role))
    app.add_route(routes.DASHBOARD, dashboard_resource)
    app.add_route(routes.DASHBOARD + "/{section}", dashboard_resource)
    app.add_route(routes.DASHBOARD + "/{section}/{page}", dashboard_resource)
    app.add_route(routes.SIGN_IN, PublicPageResource("sign-in"))
    app.add_route(routes.UNAUTHORIZED, PublicPageResource("unauthorized"))


def create_panela_app(settings: Settings | None = None) -> falcon.asgi.App:
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    configure_logging(settings)

    pool = create_pool(settings.database_url)
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None:
        logger.warning("keycloak_not_configured", detail="all requests are anonymous")

    resolver = AccessResolver(build_default_policy())
    current_user_provider = GetCurrentUserUseCase(uow_factory)
    validate_route_access = ValidateRouteAccessUseCase(current_user_provider, resolver)

    cors_origins = [
        o.strip() for o in settings.cors_origins.split(",") if o.strip()
    ]
    app = falcon.asgi.App(
        middleware=[
            CORSMiddleware(cors_origins),
            PoolLifespanMiddleware(pool),
            AuthMiddleware(keycloak, cookie_name=settings.session_cookie_name),
            RouteGuardMiddleware(validate_route_access),
        ],
    )

    async def log_exception(req, resp, ex, params):
        logger.exception("unhandled_exception", path=req.path, method=req.method)
        resp.status = falcon.HTTP_500
        resp.media = {"title": "500 Internal Server Error"}

    app.add_error_handler(Exception, log_exception)
    add_routes(app, uow_factory, resolver, current_user_provider)

    logger.info(
        "app_created",
        version=__version__,
        environment=settings.environment,
        route_rules=len(resolver.policy.route_rules),
        action_rules=len(resolver.policy.action_rules),
    )
    return app


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    app = create_panela_app()
    uvicorn.run(app, host="0.0.0.0", port=8000)
