"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from recordkeeper.application.ports.repositories.disposal_repository import (
    DisposalRepository,
)
from recordkeeper.application.ports.repositories.record_hash_repository import (
    RecordHashRepository,
)
from recordkeeper.application.ports.repositories.record_repository import (
    RecordRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def records(self) -> RecordRepository: ...

    @property
    def record_hashes(self) -> RecordHashRepository: ...

    @property
    def disposals(self) -> DisposalRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
