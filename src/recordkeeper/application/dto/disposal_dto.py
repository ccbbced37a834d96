"""Disposal DTOs."""

from dataclasses import dataclass, field
from uuid import UUID

from recordkeeper.domain.entities import Record


@dataclass(frozen=True)
class SkippedDisposal:
    """Eligible record that was not disposed in this run."""

    record_id: UUID
    record_number: str
    filename: str
    reason: str


@dataclass
class DisposalReport:
    """Records disposed by one run, plus the eligible ones that were skipped."""

    disposed: list[Record] = field(default_factory=list)
    skipped: list[SkippedDisposal] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.disposed)

    def to_dict(self) -> dict:
        return {
            "count": self.count,
            "records": [
                {
                    "id": str(r.id),
                    "record_number": r.record_number,
                    "filename": r.filename,
                    "disposed_at": r.disposed_at.isoformat() if r.disposed_at else None,
                }
                for r in self.disposed
            ],
            "skipped": [
                {
                    "record_id": str(s.record_id),
                    "record_number": s.record_number,
                    "filename": s.filename,
                    "reason": s.reason,
                }
                for s in self.skipped
            ],
        }
