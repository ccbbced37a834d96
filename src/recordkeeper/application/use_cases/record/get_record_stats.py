"""Record statistics use case."""

from collections import Counter
from collections.abc import Iterable
from datetime import datetime

from recordkeeper.application.dto.stats_dto import RecordStats
from recordkeeper.application.ports import Clock
from recordkeeper.domain.entities import Record
from recordkeeper.domain.retention import is_disposable


def summarize_records(records: Iterable[Record], now: datetime) -> RecordStats:
    """Aggregate active records by category, status, hold and disposal eligibility."""
    active = [r for r in records if r.is_active]
    by_category = Counter(r.category.value for r in active)
    by_status = Counter(r.verification_status.value for r in active)
    return RecordStats(
        total=len(active),
        by_category=dict(sorted(by_category.items())),
        by_status=dict(sorted(by_status.items())),
        with_legal_hold=sum(1 for r in active if r.legal_hold),
        expired=sum(1 for r in active if is_disposable(r, now)),
    )


class GetRecordStatsUseCase:
    """Archive statistics over active records."""

    def __init__(self, unit_of_work_factory: type, clock: Clock) -> None:
        self._uow_factory = unit_of_work_factory
        self._clock = clock

    async def execute(self) -> RecordStats:
        async with self._uow_factory() as uow:
            records = await uow.records.list_active()
        return summarize_records(records, self._clock.now())
