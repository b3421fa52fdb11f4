"""Fixtures for API tests."""

import falcon.asgi
import pytest

from panela.application.dto.session import SessionClaims
from panela.application.use_cases.auth.validate_route_access import ValidateRouteAccessUseCase
from panela.interfaces.api.middleware.auth import AuthMiddleware
from panela.interfaces.api.middleware.route_guard import RouteGuardMiddleware
from panela.main import add_routes


class FakeKeycloak:
    """Token provider that treats the token itself as the auth subject."""

    def decode_token(self, token: str) -> SessionClaims | None:
        if token == "invalid":
            return None
        return SessionClaims(subject=token, username=token)


def auth_headers(subject: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {subject}"}


@pytest.fixture
def app(uow_factory, resolver, current_user_provider):
    """Falcon ASGI app with auth, route guard and all resources."""
    app = falcon.asgi.App(
        middleware=[
            AuthMiddleware(FakeKeycloak()),
            RouteGuardMiddleware(ValidateRouteAccessUseCase(current_user_provider, resolver)),
        ]
    )
    add_routes(app, uow_factory, resolver, current_user_provider)
    return app


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    from falcon.testing import TestClient
    return TestClient(app)
