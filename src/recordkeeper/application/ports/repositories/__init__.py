"""Repository ports."""

from recordkeeper.application.ports.repositories.disposal_repository import (
    DisposalRepository,
)
from recordkeeper.application.ports.repositories.record_hash_repository import (
    RecordHashRepository,
)
from recordkeeper.application.ports.repositories.record_repository import (
    RecordRepository,
)

__all__ = [
    "DisposalRepository",
    "RecordHashRepository",
    "RecordRepository",
]
