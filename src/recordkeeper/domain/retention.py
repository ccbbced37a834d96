"""Retention rules for archived records."""

from datetime import datetime

from recordkeeper.domain.entities import Record

DISPOSAL_REASON = "Retention period expired"


def is_expired(record: Record, now: datetime) -> bool:
    """Retention period has lapsed. Records without a retention date never expire."""
    return record.retain_until is not None and record.retain_until <= now


def is_disposable(record: Record, now: datetime) -> bool:
    """Record may be disposed at ``now``.

    Legal hold always wins over expiry.
    """
    if record.legal_hold or not record.is_active:
        return False
    return is_expired(record, now)
