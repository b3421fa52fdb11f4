"""Unit tests for Keycloak token introspection."""

from unittest.mock import MagicMock

import pytest

from panela.infrastructure.auth.keycloak_provider import KeycloakProvider


@pytest.fixture
def provider() -> KeycloakProvider:
    provider = KeycloakProvider(
        server_url="http://keycloak.test",
        realm="panela",
        client_id="panela-web",
        client_secret="secret",
    )
    provider._keycloak = MagicMock()
    return provider


def test_active_token_yields_claims(provider: KeycloakProvider) -> None:
    provider._keycloak.introspect.return_value = {
        "active": True,
        "sub": "kc-123",
        "email": "ana@panela.test",
        "preferred_username": "ana",
    }

    claims = provider.decode_token("token")

    assert claims.subject == "kc-123"
    assert claims.email == "ana@panela.test"
    assert claims.username == "ana"


@pytest.mark.parametrize("info", [{"active": False, "sub": "kc-123"}, {"active": True}])
def test_inactive_or_anonymous_token(provider: KeycloakProvider, info: dict) -> None:
    provider._keycloak.introspect.return_value = info
    assert provider.decode_token("token") is None


def test_introspection_failure_is_no_session(provider: KeycloakProvider) -> None:
    provider._keycloak.introspect.side_effect = ConnectionError("keycloak down")
    assert provider.decode_token("token") is None
