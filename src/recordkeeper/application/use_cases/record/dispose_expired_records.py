"""Dispose expired records use case."""

import logging
from dataclasses import replace
from datetime import datetime
from uuid import uuid4

from recordkeeper.application.dto.disposal_dto import DisposalReport, SkippedDisposal
from recordkeeper.application.ports import Clock, ContentStore
from recordkeeper.domain.entities import Record, RecordDisposal
from recordkeeper.domain.exceptions import StoreUnavailable
from recordkeeper.domain.retention import DISPOSAL_REASON, is_disposable

logger = logging.getLogger(__name__)


class DisposeExpiredRecordsUseCase:
    """Dispose records past retention that are not under legal hold."""

    def __init__(
        self,
        unit_of_work_factory: type,
        content_store: ContentStore,
        clock: Clock,
        delete_content: bool = True,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._content_store = content_store
        self._clock = clock
        self._delete_content = delete_content

    async def execute(self, actor: str) -> DisposalReport:
        """Dispose every eligible record; a record that cannot be disposed is skipped."""
        now = self._clock.now()
        async with self._uow_factory() as uow:
            candidates = await uow.records.list_disposable(now)

        report = DisposalReport()
        for record in candidates:
            if not is_disposable(record, now):
                continue
            try:
                disposed = await self._dispose(record, actor, now)
            except StoreUnavailable:
                raise
            except Exception as e:
                logger.exception("Failed to dispose record %s", record.record_number)
                report.skipped.append(_skipped(record, str(e) or type(e).__name__))
                continue

            if disposed is None:
                logger.info(
                    "Record %s no longer eligible for disposal", record.record_number
                )
                report.skipped.append(
                    _skipped(record, "Placed on legal hold or disposed concurrently")
                )
            else:
                report.disposed.append(disposed)

        logger.info(
            "Disposal finished: disposed=%d skipped=%d", report.count, len(report.skipped)
        )
        return report

    async def _dispose(self, record: Record, actor: str, now: datetime) -> Record | None:
        disposal = RecordDisposal(
            id=uuid4(),
            record_id=record.id,
            record_number=record.record_number,
            filename=record.filename,
            disposed_at=now,
            disposed_by=actor,
            reason=DISPOSAL_REASON,
            content_deleted=False,
        )
        async with self._uow_factory() as uow:
            marked = await uow.records.mark_disposed(record.id, now, actor, DISPOSAL_REASON)
            if not marked:
                return None
            await uow.disposals.create(disposal)

        # Content goes only once the disposal is committed.
        if await self._remove_content(record):
            try:
                async with self._uow_factory() as uow:
                    await uow.disposals.mark_content_deleted(disposal.id)
            except StoreUnavailable:
                raise
            except Exception:
                logger.exception(
                    "Content of %s deleted but disposal trail not updated",
                    record.record_number,
                )

        logger.info("Disposed record %s (%s)", record.record_number, record.filename)
        return replace(
            record, disposed_at=now, disposed_by=actor, disposal_reason=DISPOSAL_REASON
        )

    async def _remove_content(self, record: Record) -> bool:
        if not self._delete_content:
            return False
        try:
            await self._content_store.delete(record.archive_path)
        except FileNotFoundError:
            logger.warning("Content already gone: %s", record.archive_path)
            return False
        except OSError:
            logger.exception("Failed to delete content: %s", record.archive_path)
            return False
        return True


def _skipped(record: Record, reason: str) -> SkippedDisposal:
    return SkippedDisposal(
        record_id=record.id,
        record_number=record.record_number,
        filename=record.filename,
        reason=reason,
    )
