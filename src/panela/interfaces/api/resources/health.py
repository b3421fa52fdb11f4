"""Health check endpoints."""

import falcon.asgi

from panela.application.ports import UnitOfWorkFactory
from panela.log import get_logger

logger = get_logger(__name__)


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory | None = None) -> None:
        self._uow_factory = unit_of_work_factory

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness; roles must be readable from the database."""
        if self._uow_factory is not None:
            try:
                async with self._uow_factory() as uow:
                    await uow.roles.list_all()
            except Exception as e:
                logger.warning("readiness_check_failed", error=str(e))
                resp.media = {"status": "unavailable"}
                resp.status = falcon.HTTP_503
                return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
