"""Auth middleware - extracts session claims from the access token."""

import asyncio

import falcon.asgi


class AuthMiddleware:
    """Middleware that validates the access token and sets req.context.session.

    The token comes from "Authorization: Bearer" (API clients) or from the
    session cookie (page requests). No token or an invalid one leaves the
    session as None. Token introspection is a blocking HTTP call, so it runs
    in a worker thread.
    """

    def __init__(self, keycloak_provider=None, cookie_name: str = "panela_session") -> None:
        self._keycloak = keycloak_provider
        self._cookie_name = cookie_name

    def _token(self, req: falcon.asgi.Request) -> str | None:
        auth = req.get_header("Authorization")
        if auth and auth.startswith("Bearer "):
            return auth[7:].strip() or None
        values = req.get_cookie_values(self._cookie_name)
        return values[0] if values else None

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Set req.context.session from the request token."""
        req.context.session = None
        token = self._token(req)
        if token and self._keycloak:
            req.context.session = await asyncio.to_thread(self._keycloak.decode_token, token)
