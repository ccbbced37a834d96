"""List records use case."""

from recordkeeper.domain.entities import Record
from recordkeeper.domain.value_objects import RecordCategory, VerificationStatus


class ListRecordsUseCase:
    """List active records, newest first, with optional filters."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        *,
        category: RecordCategory | None = None,
        verification_status: VerificationStatus | None = None,
        legal_hold: bool | None = None,
    ) -> list[Record]:
        async with self._uow_factory() as uow:
            records = await uow.records.list_active(
                category=category,
                verification_status=verification_status,
                legal_hold=legal_hold,
            )
        return sorted(records, key=lambda r: r.created_at, reverse=True)
