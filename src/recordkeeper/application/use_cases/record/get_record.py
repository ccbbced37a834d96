"""Get record use case."""

from uuid import UUID

from recordkeeper.application.dto.record_dto import RecordDetail
from recordkeeper.domain.exceptions import NotFound


class GetRecordUseCase:
    """Get an active record with its latest verifications."""

    def __init__(self, unit_of_work_factory: type, history_limit: int = 10) -> None:
        self._uow_factory = unit_of_work_factory
        self._history_limit = history_limit

    async def execute(self, record_id: UUID) -> RecordDetail:
        async with self._uow_factory() as uow:
            record = await uow.records.get_by_id(record_id)
            if not record:
                raise NotFound("Record", str(record_id))
            verifications = await uow.record_hashes.list_by_record(
                record_id, limit=self._history_limit
            )
        return RecordDetail(record=record, verifications=verifications)
