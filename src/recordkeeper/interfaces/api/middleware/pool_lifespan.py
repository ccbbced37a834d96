"""Pool lifespan middleware - the connection pool lives as long as the ASGI app."""

import logging
from typing import Any

from psycopg_pool import AsyncConnectionPool

logger = logging.getLogger(__name__)


class PoolLifespanMiddleware:
    """Opens the record store pool on startup and drains it on shutdown.

    The pool is opened without waiting for min_size connections, so the API
    starts even while the database is down; readiness reports it instead.
    """

    def __init__(self, pool: AsyncConnectionPool, close_timeout: float = 5.0) -> None:
        self._pool = pool
        self._close_timeout = close_timeout

    async def process_startup(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        await self._pool.open(wait=False)
        logger.info("Record store pool opened (max_size=%d)", self._pool.max_size)

    async def process_shutdown(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        await self._pool.close(timeout=self._close_timeout)
        logger.info("Record store pool closed")
