"""Keycloak OIDC provider for access token validation."""

from keycloak import KeycloakOpenID

from panela.application.dto.session import SessionClaims
from panela.log import get_logger

logger = get_logger(__name__)


class KeycloakProvider:
    """Keycloak OIDC - introspects access tokens and extracts session claims."""

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
    ) -> None:
        self._keycloak = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )

    def decode_token(self, token: str) -> SessionClaims | None:
        """Validate token, return its claims or None if inactive or unverifiable."""
        try:
            token_info = self._keycloak.introspect(token)
        except Exception as e:
            logger.warning("token_introspection_failed", error=str(e))
            return None
        if not token_info.get("active") or not token_info.get("sub"):
            return None
        return SessionClaims(
            subject=token_info["sub"],
            email=token_info.get("email"),
            username=token_info.get("preferred_username"),
        )
