"""Unit tests for retention predicates."""

from dataclasses import replace
from datetime import timedelta
from uuid import uuid4

import pytest

from recordkeeper.domain.entities import Record
from recordkeeper.domain.retention import is_disposable, is_expired

from tests.conftest import NOW


def _record(**overrides) -> Record:
    base = Record(
        id=uuid4(),
        record_number="REC-2025-001",
        filename="contract.pdf",
        archive_path="/archive/contract.pdf",
        size=10,
        hash="0" * 64,
        created_at=NOW - timedelta(days=400),
    )
    return replace(base, **overrides)


@pytest.mark.parametrize(
    ("retain_until", "legal_hold", "expected"),
    [
        (NOW - timedelta(days=1), False, True),
        (NOW, False, True),
        (NOW + timedelta(seconds=1), False, False),
        (NOW - timedelta(days=1), True, False),
        (NOW + timedelta(days=1), True, False),
        (None, False, False),
        (None, True, False),
    ],
)
def test_is_disposable(retain_until, legal_hold, expected) -> None:
    """Expiry makes a record disposable only without legal hold."""
    record = _record(retain_until=retain_until, legal_hold=legal_hold)
    assert is_disposable(record, NOW) is expected


def test_legal_hold_overrides_long_expired_record() -> None:
    """A hold blocks disposal however long ago retention lapsed."""
    record = _record(retain_until=NOW - timedelta(days=3650), legal_hold=True)
    assert is_expired(record, NOW)
    assert not is_disposable(record, NOW)


def test_disposed_record_is_not_disposable_again() -> None:
    record = _record(retain_until=NOW - timedelta(days=1), disposed_at=NOW - timedelta(hours=1))
    assert not is_disposable(record, NOW)


def test_record_without_retention_date_never_expires() -> None:
    assert not is_expired(_record(retain_until=None), NOW + timedelta(days=100000))
