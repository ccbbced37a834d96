"""Domain value objects."""

from recordkeeper.domain.value_objects.content_hash import (
    DEFAULT_HASH_ALGORITHM,
    ContentHash,
)
from recordkeeper.domain.value_objects.record_category import RecordCategory
from recordkeeper.domain.value_objects.verification_status import VerificationStatus

__all__ = [
    "DEFAULT_HASH_ALGORITHM",
    "ContentHash",
    "RecordCategory",
    "VerificationStatus",
]
