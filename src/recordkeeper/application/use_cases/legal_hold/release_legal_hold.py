"""Release legal hold use case."""

import logging
from uuid import UUID

from recordkeeper.domain.entities import Record
from recordkeeper.domain.exceptions import LegalHoldConflict, NotFound

logger = logging.getLogger(__name__)


class ReleaseLegalHoldUseCase:
    """Lift a legal hold so the record follows its retention date again."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, record_id: UUID, actor: str) -> Record:
        async with self._uow_factory() as uow:
            record = await uow.records.get_by_id(record_id)
            if not record:
                raise NotFound("Record", str(record_id))
            if not record.legal_hold:
                raise LegalHoldConflict("Record does not have legal hold")

            record.legal_hold = False
            record.legal_hold_reason = None
            record.legal_hold_by = None
            record.legal_hold_at = None
            if not await uow.records.update_legal_hold(record):
                raise NotFound("Record", str(record_id))

        logger.info("Legal hold released on %s by %s", record.record_number, actor)
        return record
