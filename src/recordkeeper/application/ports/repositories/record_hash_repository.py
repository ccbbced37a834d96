"""Record hash repository port - append-only verification trail."""

from typing import Protocol
from uuid import UUID

from recordkeeper.domain.entities import RecordHash


class RecordHashRepository(Protocol):
    """Port for verification audit entries. Entries are never updated or deleted."""

    async def create(self, record_hash: RecordHash) -> RecordHash: ...

    async def list_by_record(self, record_id: UUID, limit: int = 10) -> list[RecordHash]: ...

    async def list_recent(self, limit: int = 10) -> list[RecordHash]: ...
