"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import psycopg
from psycopg_pool import AsyncConnectionPool

from recordkeeper.domain.exceptions import StoreUnavailable
from recordkeeper.infrastructure.persistence.postgres.disposal_repository import (
    PostgresDisposalRepository,
)
from recordkeeper.infrastructure.persistence.postgres.record_hash_repository import (
    PostgresRecordHashRepository,
)
from recordkeeper.infrastructure.persistence.postgres.record_repository import (
    PostgresRecordRepository,
)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._records = PostgresRecordRepository(self._conn)
        self._record_hashes = PostgresRecordHashRepository(self._conn)
        self._disposals = PostgresDisposalRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def records(self) -> PostgresRecordRepository:
        return self._records

    @property
    def record_hashes(self) -> PostgresRecordHashRepository:
        return self._record_hashes

    @property
    def disposals(self) -> PostgresDisposalRepository:
        return self._disposals

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager).

    Lost connectivity surfaces as StoreUnavailable.
    """

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        try:
            async with PostgresUnitOfWork(pool) as uow:
                try:
                    yield uow
                    await uow.commit()
                except BaseException:
                    await uow.rollback()
                    raise
        except psycopg.OperationalError as e:
            raise StoreUnavailable(f"Record store unavailable: {e}") from e

    return factory
