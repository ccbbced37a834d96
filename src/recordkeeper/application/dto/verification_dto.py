"""Verification DTOs."""

from dataclasses import dataclass, field
from uuid import UUID

from recordkeeper.domain.entities import RecordHash
from recordkeeper.domain.value_objects import VerificationStatus


@dataclass(frozen=True)
class RecordOutcome:
    """Result of verifying one record.

    error is set whenever the record could not be verified cleanly: the
    operational failure for ERROR, or the mismatch detail for FAILED.
    """

    record_id: UUID
    record_number: str
    filename: str
    status: VerificationStatus
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is VerificationStatus.VERIFIED

    def to_dict(self) -> dict:
        return {
            "record_id": str(self.record_id),
            "record_number": self.record_number,
            "filename": self.filename,
            "status": self.status.value,
            "error": self.error,
        }


@dataclass
class VerificationReport:
    """Per-record outcomes of one verification batch."""

    outcomes: list[RecordOutcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def verified(self) -> int:
        return self._count(VerificationStatus.VERIFIED)

    @property
    def failed(self) -> int:
        return self._count(VerificationStatus.FAILED)

    @property
    def errors(self) -> int:
        return self._count(VerificationStatus.ERROR)

    @property
    def failed_records(self) -> list[RecordOutcome]:
        """Tamper signals - content does not match the ingestion hash."""
        return [o for o in self.outcomes if o.status is VerificationStatus.FAILED]

    @property
    def error_records(self) -> list[RecordOutcome]:
        """Records whose content could not be verified at all."""
        return [o for o in self.outcomes if o.status is VerificationStatus.ERROR]

    @property
    def success(self) -> bool:
        return self.failed == 0 and self.errors == 0

    def _count(self, status: VerificationStatus) -> int:
        return sum(1 for o in self.outcomes if o.status is status)

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "verified": self.verified,
            "failed": self.failed,
            "errors": self.errors,
            "failed_records": [o.to_dict() for o in self.failed_records],
            "error_records": [o.to_dict() for o in self.error_records],
        }


@dataclass(frozen=True)
class VerificationHistoryItem:
    """Verification entry with the record it belongs to, for display."""

    record_number: str
    filename: str
    verification: RecordHash

