"""Record disposal entity - audit trail of disposals."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class RecordDisposal:
    """Append-only audit entry written when a record is disposed."""

    id: UUID
    record_id: UUID
    record_number: str
    filename: str
    disposed_at: datetime
    disposed_by: str
    reason: str
    content_deleted: bool
