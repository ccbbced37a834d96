"""Record hash entity - one verification attempt."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class RecordHash:
    """Append-only audit entry of a single verification.

    computed_hash is empty when the content could not be hashed.
    """

    id: UUID
    record_id: UUID
    computed_hash: str
    expected_hash: str
    matched: bool
    verified_at: datetime
    verified_by: str | None
    file_exists: bool
    file_size: int | None = None
    error: str | None = None
