"""PostgreSQL async connection pool."""

import psycopg
from psycopg_pool import AsyncConnectionPool

from recordkeeper.domain.exceptions import StoreUnavailable


def create_pool(conninfo: str, min_size: int = 1, max_size: int = 10) -> AsyncConnectionPool:
    """Create async connection pool.

    Pool is created with open=False. Caller must open it before use, either
    with ``async with pool`` (CLI job) or PoolLifespanMiddleware (ASGI).
    """
    return AsyncConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        open=False,
    )


async def ping(pool: AsyncConnectionPool, timeout: float = 2.0) -> None:
    """Round-trip to the database. Raises StoreUnavailable when it cannot be reached."""
    try:
        async with pool.connection(timeout=timeout) as conn:
            await conn.execute("SELECT 1")
    except psycopg.OperationalError as e:
        raise StoreUnavailable(f"Record store unavailable: {e}") from e
