"""Place legal hold use case."""

import logging
from uuid import UUID

from recordkeeper.application.ports import Clock
from recordkeeper.domain.entities import Record
from recordkeeper.domain.exceptions import LegalHoldConflict, NotFound, ValidationError

logger = logging.getLogger(__name__)


class PlaceLegalHoldUseCase:
    """Put a record under legal hold, blocking its disposal."""

    def __init__(self, unit_of_work_factory: type, clock: Clock) -> None:
        self._uow_factory = unit_of_work_factory
        self._clock = clock

    async def execute(self, record_id: UUID, actor: str, reason: str) -> Record:
        if not reason or not reason.strip():
            raise ValidationError("Legal hold reason is required")

        async with self._uow_factory() as uow:
            record = await uow.records.get_by_id(record_id)
            if not record:
                raise NotFound("Record", str(record_id))
            if record.legal_hold:
                raise LegalHoldConflict("Record already has legal hold")

            record.legal_hold = True
            record.legal_hold_reason = reason.strip()
            record.legal_hold_by = actor
            record.legal_hold_at = self._clock.now()
            if not await uow.records.update_legal_hold(record):
                raise NotFound("Record", str(record_id))

        logger.info("Legal hold placed on %s by %s", record.record_number, actor)
        return record
