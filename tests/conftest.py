"""Pytest fixtures for RecordKeeper tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from recordkeeper.application.ports import ContentFingerprint
from recordkeeper.config import Settings
from recordkeeper.domain.entities import Record, RecordDisposal, RecordHash
from recordkeeper.domain.exceptions import StoreUnavailable
from recordkeeper.domain.value_objects import (
    ContentHash,
    RecordCategory,
    VerificationStatus,
)
from recordkeeper.main import RecordServices, build_record_services

NOW = datetime(2025, 10, 21, 12, 0, tzinfo=UTC)


# --- Fake repositories ---


class FakeRecordRepository:
    """In-memory record repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Record] = {}
        self.unavailable = False
        self.fail_updates: set[UUID] = set()

    def add(self, record: Record) -> Record:
        self._by_id[record.id] = record
        return record

    def _check_available(self) -> None:
        if self.unavailable:
            raise StoreUnavailable("Record store unavailable: connection refused")

    async def get_by_id(self, record_id: UUID, include_disposed: bool = False) -> Record | None:
        self._check_available()
        record = self._by_id.get(record_id)
        if not record or (not include_disposed and record.disposed_at):
            return None
        return record

    async def list_active(
        self,
        *,
        category: RecordCategory | None = None,
        verification_status: VerificationStatus | None = None,
        legal_hold: bool | None = None,
    ) -> list[Record]:
        self._check_available()
        items = [r for r in self._by_id.values() if r.disposed_at is None]
        if category is not None:
            items = [r for r in items if r.category == category]
        if verification_status is not None:
            items = [r for r in items if r.verification_status == verification_status]
        if legal_hold is not None:
            items = [r for r in items if r.legal_hold == legal_hold]
        return items

    async def list_disposable(self, now: datetime) -> list[Record]:
        self._check_available()
        return [
            r
            for r in self._by_id.values()
            if r.disposed_at is None
            and not r.legal_hold
            and r.retain_until is not None
            and r.retain_until <= now
        ]

    async def update_verification(
        self, record_id: UUID, status: VerificationStatus, verified_at: datetime
    ) -> bool:
        self._check_available()
        if record_id in self.fail_updates:
            raise RuntimeError("row lock timeout")
        record = self._by_id.get(record_id)
        if not record or record.disposed_at:
            return False
        record.verification_status = status
        record.last_verified_at = verified_at
        return True

    async def update_legal_hold(self, record: Record) -> bool:
        self._check_available()
        current = self._by_id.get(record.id)
        if not current or current.disposed_at:
            return False
        self._by_id[record.id] = record
        return True

    async def mark_disposed(
        self, record_id: UUID, disposed_at: datetime, disposed_by: str, reason: str
    ) -> bool:
        self._check_available()
        if record_id in self.fail_updates:
            raise RuntimeError("row lock timeout")
        record = self._by_id.get(record_id)
        if not record or record.disposed_at or record.legal_hold:
            return False
        self._by_id[record_id] = replace(
            record, disposed_at=disposed_at, disposed_by=disposed_by, disposal_reason=reason
        )
        return True


class FakeRecordHashRepository:
    """In-memory append-only verification trail."""

    def __init__(self) -> None:
        self.entries: list[RecordHash] = []
        self.fail_next = 0

    async def create(self, record_hash: RecordHash) -> RecordHash:
        if self.fail_next:
            self.fail_next -= 1
            raise RuntimeError("audit insert failed")
        self.entries.append(record_hash)
        return record_hash

    async def list_by_record(self, record_id: UUID, limit: int = 10) -> list[RecordHash]:
        items = [e for e in self.entries if e.record_id == record_id]
        return sorted(items, key=lambda e: e.verified_at, reverse=True)[:limit]

    async def list_recent(self, limit: int = 10) -> list[RecordHash]:
        return sorted(self.entries, key=lambda e: e.verified_at, reverse=True)[:limit]


class FakeDisposalRepository:
    """In-memory disposal trail."""

    def __init__(self) -> None:
        self.entries: list[RecordDisposal] = []
        self.fail_create = False

    async def create(self, disposal: RecordDisposal) -> RecordDisposal:
        if self.fail_create:
            raise RuntimeError("disposal insert failed")
        self.entries.append(disposal)
        return disposal

    async def mark_content_deleted(self, disposal_id: UUID) -> None:
        self.entries = [
            replace(e, content_deleted=True) if e.id == disposal_id else e
            for e in self.entries
        ]

    async def list_recent(self, limit: int = 10) -> list[RecordDisposal]:
        return sorted(self.entries, key=lambda e: e.disposed_at, reverse=True)[:limit]


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.records = FakeRecordRepository()
        self.record_hashes = FakeRecordHashRepository()
        self.disposals = FakeDisposalRepository()

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


# --- Fake collaborators ---


class FakeContentStore:
    """In-memory content keyed by archive path."""

    def __init__(self) -> None:
        self.files: dict[str, bytes] = {}
        self.unreadable: set[str] = set()
        self.undeletable: set[str] = set()
        self.deleted: list[str] = []

    async def fingerprint(self, path: str, algorithm: str) -> ContentFingerprint:
        if path in self.unreadable:
            raise PermissionError(f"Permission denied: '{path}'")
        if path not in self.files:
            raise FileNotFoundError(path)
        data = self.files[path]
        return ContentFingerprint(hash=ContentHash.of(data, algorithm), size=len(data))

    async def delete(self, path: str) -> None:
        if path in self.undeletable:
            raise PermissionError(f"Permission denied: '{path}'")
        if path not in self.files:
            raise FileNotFoundError(path)
        del self.files[path]
        self.deleted.append(path)


class FixedClock:
    """Clock frozen at a given instant; advance() moves it forward."""

    def __init__(self, now: datetime = NOW) -> None:
        self._now = now

    def now(self) -> datetime:
        return self._now

    def advance(self, delta: timedelta) -> None:
        self._now += delta


def add_record(
    uow: FakeUnitOfWork,
    store: FakeContentStore,
    record_number: str,
    content: bytes = b"archived content",
    **overrides: object,
) -> Record:
    """Archive content in the fake store and register its record."""
    algorithm = str(overrides.pop("hash_algorithm", "SHA256"))
    path = str(overrides.pop("archive_path", f"/archive/{record_number}.pdf"))
    store.files[path] = content
    record = Record(
        id=uuid4(),
        record_number=record_number,
        filename=str(overrides.pop("filename", f"{record_number.lower()}.pdf")),
        archive_path=path,
        size=len(content),
        hash=ContentHash.of(content, algorithm).value,
        hash_algorithm=algorithm,
        created_at=NOW - timedelta(days=30),
    )
    return uow.records.add(replace(record, **overrides))


# --- Fixtures ---


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Shared in-memory UnitOfWork for one test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory yielding the same FakeUnitOfWork on every call."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield fake_uow

    return _factory


@pytest.fixture
def content_store() -> FakeContentStore:
    return FakeContentStore()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        verify_concurrency=1,
        delete_content_on_disposal=True,
        default_actor="system",
    )


@pytest.fixture
def services(uow_factory, content_store, clock, settings) -> RecordServices:
    """Use cases wired against in-memory collaborators."""
    return build_record_services(
        unit_of_work_factory=uow_factory,
        content_store=content_store,
        clock=clock,
        settings=settings,
    )
