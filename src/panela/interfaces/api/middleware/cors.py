"""CORS middleware - adds Access-Control-Allow-Origin headers."""

import falcon.asgi


class CORSMiddleware:
    """Middleware that adds CORS headers and handles OPTIONS preflight.

    Credentials are allowed so the dashboard can send the session cookie, which
    means the origin is echoed back and never a wildcard.
    """

    def __init__(self, origins: list[str]) -> None:
        self._origins = origins

    def _set_cors_headers(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        origin = req.get_header("Origin")
        if origin and origin in self._origins:
            resp.set_header("Access-Control-Allow-Origin", origin)
        elif self._origins:
            resp.set_header("Access-Control-Allow-Origin", self._origins[0])
        resp.set_header("Access-Control-Allow-Credentials", "true")
        resp.set_header("Access-Control-Allow-Methods", "GET, POST, PUT, OPTIONS")
        resp.set_header("Access-Control-Allow-Headers", "Authorization, Content-Type")
        resp.set_header("Vary", "Origin")

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Answer OPTIONS preflight before auth and route guard run."""
        self._set_cors_headers(req, resp)
        if req.method == "OPTIONS":
            resp.status = falcon.HTTP_204
            resp.complete = True

    async def process_response(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, req_succeeded
    ) -> None:
        self._set_cors_headers(req, resp)
