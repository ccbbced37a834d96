"""Disposal repository port - append-only disposal trail."""

from typing import Protocol
from uuid import UUID

from recordkeeper.domain.entities import RecordDisposal


class DisposalRepository(Protocol):
    """Port for disposal audit entries."""

    async def create(self, disposal: RecordDisposal) -> RecordDisposal: ...

    async def mark_content_deleted(self, disposal_id: UUID) -> None:
        """Flag that the disposed record's content was removed. The only permitted update."""
        ...

    async def list_recent(self, limit: int = 10) -> list[RecordDisposal]: ...
