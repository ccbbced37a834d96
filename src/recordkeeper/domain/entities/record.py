"""Record entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from recordkeeper.domain.value_objects import (
    DEFAULT_HASH_ALGORITHM,
    RecordCategory,
    VerificationStatus,
)


@dataclass
class Record:
    """Archived file under a retention policy, with the hash captured at ingestion."""

    id: UUID
    record_number: str
    filename: str
    archive_path: str
    size: int
    hash: str
    created_at: datetime
    category: RecordCategory = RecordCategory.DOCUMENT
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM
    retain_until: datetime | None = None
    legal_hold: bool = False
    legal_hold_reason: str | None = None
    legal_hold_by: str | None = None
    legal_hold_at: datetime | None = None
    verification_status: VerificationStatus = VerificationStatus.PENDING
    last_verified_at: datetime | None = None
    disposed_at: datetime | None = None
    disposed_by: str | None = None
    disposal_reason: str | None = None

    @property
    def is_active(self) -> bool:
        return self.disposed_at is None
