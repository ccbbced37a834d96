"""Unit tests for statistics, history and record browsing use cases."""

from datetime import timedelta

import pytest

from recordkeeper.application.use_cases.record.get_record_stats import summarize_records
from recordkeeper.domain.exceptions import NotFound
from recordkeeper.domain.value_objects import RecordCategory, VerificationStatus

from tests.conftest import NOW, add_record


@pytest.mark.asyncio
async def test_stats_aggregate_active_records(services, fake_uow, content_store) -> None:
    add_record(
        fake_uow,
        content_store,
        "REC-2025-001",
        category=RecordCategory.CONTRACT,
        verification_status=VerificationStatus.VERIFIED,
    )
    add_record(
        fake_uow,
        content_store,
        "REC-2025-002",
        category=RecordCategory.INVOICE,
        retain_until=NOW - timedelta(days=1),
    )
    add_record(
        fake_uow,
        content_store,
        "REC-2025-003",
        category=RecordCategory.INVOICE,
        retain_until=NOW - timedelta(days=1),
        legal_hold=True,
    )
    add_record(
        fake_uow,
        content_store,
        "REC-2025-004",
        category=RecordCategory.TAX,
        disposed_at=NOW - timedelta(days=2),
    )

    stats = await services.get_stats.execute()

    assert stats.total == 3
    assert stats.by_category == {"CONTRACT": 1, "INVOICE": 2}
    assert stats.by_status == {"PENDING": 2, "VERIFIED": 1}
    assert stats.with_legal_hold == 1
    assert stats.expired == 1


@pytest.mark.asyncio
async def test_stats_are_idempotent(services, fake_uow, content_store) -> None:
    add_record(fake_uow, content_store, "REC-2025-001", retain_until=NOW)
    add_record(fake_uow, content_store, "REC-2025-002", legal_hold=True)

    first = await services.get_stats.execute()
    second = await services.get_stats.execute()

    assert first == second
    assert first.to_dict() == second.to_dict()


def test_summarize_empty_archive() -> None:
    stats = summarize_records([], NOW)

    assert stats.total == 0
    assert stats.by_category == {}
    assert stats.by_status == {}
    assert stats.expired == 0


@pytest.mark.asyncio
async def test_history_newest_first_with_record_numbers(
    services, fake_uow, content_store, clock
) -> None:
    add_record(fake_uow, content_store, "REC-2025-001")
    await services.verify_all.execute("system")
    clock.advance(timedelta(hours=1))
    add_record(fake_uow, content_store, "REC-2025-002")
    await services.verify_record.execute(
        (await fake_uow.records.list_active())[-1].id, "auditor"
    )

    history = await services.get_history.execute()

    assert [h.record_number for h in history] == ["REC-2025-002", "REC-2025-001"]
    assert history[0].verification.verified_by == "auditor"
    assert history[0].filename == "rec-2025-002.pdf"


@pytest.mark.asyncio
async def test_history_respects_limit(services, fake_uow, content_store, clock) -> None:
    add_record(fake_uow, content_store, "REC-2025-001")
    for _ in range(5):
        await services.verify_all.execute("system")
        clock.advance(timedelta(minutes=5))

    history = await services.get_history.execute(limit=3)

    assert len(history) == 3


@pytest.mark.asyncio
async def test_history_keeps_entries_of_disposed_records(
    services, fake_uow, content_store
) -> None:
    add_record(fake_uow, content_store, "REC-2025-001", retain_until=NOW)
    await services.verify_all.execute("system")
    await services.dispose_expired.execute("system")

    history = await services.get_history.execute()

    assert [h.record_number for h in history] == ["REC-2025-001"]


@pytest.mark.asyncio
async def test_list_records_newest_first_and_filtered(services, fake_uow, content_store) -> None:
    add_record(fake_uow, content_store, "REC-2025-001", created_at=NOW - timedelta(days=3))
    add_record(
        fake_uow,
        content_store,
        "REC-2025-002",
        created_at=NOW - timedelta(days=1),
        category=RecordCategory.PHOTO,
    )
    add_record(fake_uow, content_store, "REC-2025-003", created_at=NOW - timedelta(days=2))

    records = await services.list_records.execute()
    photos = await services.list_records.execute(category=RecordCategory.PHOTO)

    assert [r.record_number for r in records] == ["REC-2025-002", "REC-2025-003", "REC-2025-001"]
    assert [r.record_number for r in photos] == ["REC-2025-002"]


@pytest.mark.asyncio
async def test_get_record_with_verifications(services, fake_uow, content_store) -> None:
    record = add_record(fake_uow, content_store, "REC-2025-001")
    await services.verify_all.execute("system")

    detail = await services.get_record.execute(record.id)

    assert detail.record.record_number == "REC-2025-001"
    assert len(detail.verifications) == 1
    assert detail.verifications[0].matched


@pytest.mark.asyncio
async def test_get_disposed_record_not_found(services, fake_uow, content_store) -> None:
    record = add_record(fake_uow, content_store, "REC-2025-001", disposed_at=NOW)

    with pytest.raises(NotFound):
        await services.get_record.execute(record.id)
