"""Record repository port."""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from recordkeeper.domain.entities import Record
from recordkeeper.domain.value_objects import RecordCategory, VerificationStatus


class RecordRepository(Protocol):
    """Port for archived record persistence."""

    async def get_by_id(
        self, record_id: UUID, include_disposed: bool = False
    ) -> Record | None: ...

    async def list_active(
        self,
        *,
        category: RecordCategory | None = None,
        verification_status: VerificationStatus | None = None,
        legal_hold: bool | None = None,
    ) -> list[Record]: ...

    async def list_disposable(self, now: datetime) -> list[Record]: ...

    async def update_verification(
        self, record_id: UUID, status: VerificationStatus, verified_at: datetime
    ) -> bool:
        """Set verification status on an active record. False if it is gone or disposed."""
        ...

    async def update_legal_hold(self, record: Record) -> bool:
        """Persist hold fields on an active record. False if it was disposed meanwhile."""
        ...

    async def mark_disposed(
        self, record_id: UUID, disposed_at: datetime, disposed_by: str, reason: str
    ) -> bool:
        """Dispose an active, unheld record. False if hold or disposal got there first."""
        ...
