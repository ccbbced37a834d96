"""Verify all records use case - batch hash verification of the archive."""

import asyncio
import logging

from recordkeeper.application.dto.verification_dto import RecordOutcome, VerificationReport
from recordkeeper.application.use_cases.record.verify_record import VerifyRecordUseCase
from recordkeeper.domain.entities import Record
from recordkeeper.domain.exceptions import StoreUnavailable
from recordkeeper.domain.value_objects import VerificationStatus

logger = logging.getLogger(__name__)


class VerifyAllRecordsUseCase:
    """Verify every active record; one record's failure never stops the batch."""

    def __init__(
        self,
        unit_of_work_factory: type,
        verify_record: VerifyRecordUseCase,
        concurrency: int = 1,
    ) -> None:
        if concurrency < 1:
            raise ValueError("concurrency must be at least 1")
        self._uow_factory = unit_of_work_factory
        self._verify_record = verify_record
        self._concurrency = concurrency

    async def execute(self, actor: str) -> VerificationReport:
        """Verify all active records. Raises StoreUnavailable if the store is lost."""
        async with self._uow_factory() as uow:
            records = await uow.records.list_active()

        logger.info("Verifying %d records as %s", len(records), actor)
        semaphore = asyncio.Semaphore(self._concurrency)

        async def _run(record: Record) -> RecordOutcome:
            async with semaphore:
                return await self._verify_one(record, actor)

        tasks = [asyncio.create_task(_run(r)) for r in records]
        try:
            outcomes = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            raise

        report = VerificationReport(outcomes=list(outcomes))
        logger.info(
            "Verification finished: total=%d verified=%d failed=%d errors=%d",
            report.total,
            report.verified,
            report.failed,
            report.errors,
        )
        return report

    async def _verify_one(self, record: Record, actor: str) -> RecordOutcome:
        try:
            return await self._verify_record.verify(record, actor)
        except StoreUnavailable:
            raise
        except Exception as e:
            logger.exception("Verification of record %s aborted", record.record_number)
            error = str(e) or type(e).__name__

        try:
            return await self._verify_record.record_error(record, actor, error)
        except StoreUnavailable:
            raise
        except Exception:
            logger.exception("Could not record error outcome for %s", record.record_number)
            return RecordOutcome(
                record_id=record.id,
                record_number=record.record_number,
                filename=record.filename,
                status=VerificationStatus.ERROR,
                error=error,
            )
