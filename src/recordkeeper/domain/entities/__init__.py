"""Domain entities."""

from recordkeeper.domain.entities.record import Record
from recordkeeper.domain.entities.record_disposal import RecordDisposal
from recordkeeper.domain.entities.record_hash import RecordHash

__all__ = [
    "Record",
    "RecordDisposal",
    "RecordHash",
]
