"""Recent verification history use case."""

from recordkeeper.application.dto.verification_dto import VerificationHistoryItem


class GetVerificationHistoryUseCase:
    """Latest verification entries across the archive, newest first."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, limit: int = 10) -> list[VerificationHistoryItem]:
        items: list[VerificationHistoryItem] = []
        async with self._uow_factory() as uow:
            entries = await uow.record_hashes.list_recent(limit)
            for entry in entries:
                record = await uow.records.get_by_id(entry.record_id, include_disposed=True)
                items.append(
                    VerificationHistoryItem(
                        record_number=record.record_number if record else "?",
                        filename=record.filename if record else "",
                        verification=entry,
                    )
                )
        return items
