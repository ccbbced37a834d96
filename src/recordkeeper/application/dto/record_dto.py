"""Record DTOs."""

from dataclasses import dataclass, field

from recordkeeper.domain.entities import Record, RecordHash


@dataclass
class RecordDetail:
    """Record with its latest verification entries, newest first."""

    record: Record
    verifications: list[RecordHash] = field(default_factory=list)
