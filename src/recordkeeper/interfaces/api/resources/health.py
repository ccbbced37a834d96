"""Health check endpoints."""

import logging
from collections.abc import Awaitable, Callable

import falcon.asgi

from recordkeeper.domain.exceptions import StoreUnavailable

logger = logging.getLogger(__name__)


class HealthResource:
    """Liveness and readiness. Readiness fails while the record store is unreachable."""

    def __init__(self, ready_check: Callable[[], Awaitable[None]] | None = None) -> None:
        self._ready_check = ready_check

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness."""
        if self._ready_check is not None:
            try:
                await self._ready_check()
            except StoreUnavailable as e:
                logger.warning("Readiness check failed: %s", e)
                resp.media = {"status": "unavailable", "error": str(e)}
                resp.status = falcon.HTTP_503
                return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
