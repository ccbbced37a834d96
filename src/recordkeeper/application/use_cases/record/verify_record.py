"""Verify record use case - recompute one record's content hash."""

import logging
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID, uuid4

from recordkeeper.application.dto.verification_dto import RecordOutcome
from recordkeeper.application.ports import Clock, ContentStore
from recordkeeper.domain.entities import Record, RecordHash
from recordkeeper.domain.exceptions import NotFound
from recordkeeper.domain.value_objects import VerificationStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Check:
    status: VerificationStatus
    entry: RecordHash
    detail: str | None


class VerifyRecordUseCase:
    """Compare a record's stored content against the hash captured at ingestion."""

    def __init__(
        self,
        unit_of_work_factory: type,
        content_store: ContentStore,
        clock: Clock,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._content_store = content_store
        self._clock = clock

    async def execute(self, record_id: UUID, actor: str) -> RecordOutcome:
        """Verify one active record by id."""
        async with self._uow_factory() as uow:
            record = await uow.records.get_by_id(record_id)
        if not record:
            raise NotFound("Record", str(record_id))
        return await self.verify(record, actor)

    async def verify(self, record: Record, actor: str) -> RecordOutcome:
        """Verify an already loaded record and persist the outcome.

        Content problems become FAILED or ERROR outcomes. Store errors raise.
        """
        check = await self._check_content(record, actor)

        async with self._uow_factory() as uow:
            updated = await uow.records.update_verification(
                record.id, check.status, check.entry.verified_at
            )
            if not updated:
                logger.warning(
                    "Record %s was disposed during verification", record.record_number
                )
                return RecordOutcome(
                    record_id=record.id,
                    record_number=record.record_number,
                    filename=record.filename,
                    status=VerificationStatus.ERROR,
                    error="Record was disposed during verification",
                )
            await uow.record_hashes.create(check.entry)

        if check.status is VerificationStatus.FAILED:
            logger.warning(
                "Record %s (%s) failed verification, possible tampering: %s",
                record.record_number,
                record.filename,
                check.detail,
            )
        elif check.status is VerificationStatus.ERROR:
            logger.warning(
                "Record %s (%s) could not be verified: %s",
                record.record_number,
                record.filename,
                check.detail,
            )
        else:
            logger.debug("Record %s verified", record.record_number)

        return RecordOutcome(
            record_id=record.id,
            record_number=record.record_number,
            filename=record.filename,
            status=check.status,
            error=check.detail,
        )

    async def record_error(self, record: Record, actor: str, error: str) -> RecordOutcome:
        """Persist a plain ERROR outcome after verify() itself failed to write.

        Runs in a fresh unit of work. Store errors raise.
        """
        entry = _entry(record, actor, self._clock.now(), file_exists=True, error=error)
        async with self._uow_factory() as uow:
            if await uow.records.update_verification(
                record.id, VerificationStatus.ERROR, entry.verified_at
            ):
                await uow.record_hashes.create(entry)
        return RecordOutcome(
            record_id=record.id,
            record_number=record.record_number,
            filename=record.filename,
            status=VerificationStatus.ERROR,
            error=error,
        )

    async def _check_content(self, record: Record, actor: str) -> _Check:
        now = self._clock.now()
        try:
            fingerprint = await self._content_store.fingerprint(
                record.archive_path, record.hash_algorithm
            )
        except FileNotFoundError:
            error = f"File not found: {record.archive_path}"
            return _Check(
                VerificationStatus.ERROR,
                _entry(record, actor, now, file_exists=False, error=error),
                error,
            )
        except (OSError, ValueError) as e:
            error = f"Cannot read {record.archive_path}: {e}"
            return _Check(
                VerificationStatus.ERROR,
                _entry(record, actor, now, file_exists=True, error=error),
                error,
            )

        matched = fingerprint.hash.matches(record.hash)
        error = None
        if fingerprint.size != record.size:
            error = f"File size mismatch: expected {record.size}, got {fingerprint.size}"
            matched = False
        detail = error if error else (None if matched else "Content hash mismatch")

        entry = _entry(
            record,
            actor,
            now,
            file_exists=True,
            computed_hash=fingerprint.hash.value,
            matched=matched,
            file_size=fingerprint.size,
            error=error,
        )
        status = VerificationStatus.VERIFIED if matched else VerificationStatus.FAILED
        return _Check(status, entry, detail)


def _entry(
    record: Record,
    actor: str,
    verified_at: datetime,
    *,
    file_exists: bool,
    computed_hash: str = "",
    matched: bool = False,
    file_size: int | None = None,
    error: str | None = None,
) -> RecordHash:
    return RecordHash(
        id=uuid4(),
        record_id=record.id,
        computed_hash=computed_hash,
        expected_hash=record.hash,
        matched=matched,
        verified_at=verified_at,
        verified_by=actor,
        file_exists=file_exists,
        file_size=file_size,
        error=error,
    )
