"""PostgreSQL record repository implementation."""

from datetime import datetime
from uuid import UUID

from psycopg import AsyncConnection

from recordkeeper.domain.entities import Record
from recordkeeper.domain.value_objects import RecordCategory, VerificationStatus

_COLUMNS = (
    "id, record_number, filename, archive_path, size, hash, hash_algorithm, category, "
    "created_at, retain_until, legal_hold, legal_hold_reason, legal_hold_by, legal_hold_at, "
    "verification_status, last_verified_at, disposed_at, disposed_by, disposal_reason"
)


def _row_to_record(r: tuple) -> Record:
    return Record(
        id=r[0],
        record_number=r[1],
        filename=r[2],
        archive_path=r[3],
        size=r[4],
        hash=r[5],
        hash_algorithm=r[6],
        category=RecordCategory(r[7]),
        created_at=r[8],
        retain_until=r[9],
        legal_hold=r[10],
        legal_hold_reason=r[11],
        legal_hold_by=r[12],
        legal_hold_at=r[13],
        verification_status=VerificationStatus(r[14]),
        last_verified_at=r[15],
        disposed_at=r[16],
        disposed_by=r[17],
        disposal_reason=r[18],
    )


class PostgresRecordRepository:
    """Record repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, record_id: UUID, include_disposed: bool = False) -> Record | None:
        """Get record by id."""
        q = f"SELECT {_COLUMNS} FROM records WHERE id = %s"
        if not include_disposed:
            q += " AND disposed_at IS NULL"
        cur = await self._conn.execute(q, (record_id,))
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_record(r)

    async def list_active(
        self,
        *,
        category: RecordCategory | None = None,
        verification_status: VerificationStatus | None = None,
        legal_hold: bool | None = None,
    ) -> list[Record]:
        """List non-disposed records, newest first."""
        conditions = ["disposed_at IS NULL"]
        params: list[object] = []
        if category is not None:
            conditions.append("category = %s")
            params.append(category.value)
        if verification_status is not None:
            conditions.append("verification_status = %s")
            params.append(verification_status.value)
        if legal_hold is not None:
            conditions.append("legal_hold = %s")
            params.append(legal_hold)
        q = (
            f"SELECT {_COLUMNS} FROM records WHERE "
            + " AND ".join(conditions)
            + " ORDER BY created_at DESC, id"
        )
        cur = await self._conn.execute(q, tuple(params))
        rows = await cur.fetchall()
        return [_row_to_record(r) for r in rows]

    async def list_disposable(self, now: datetime) -> list[Record]:
        """Active records past retention and not under legal hold."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM records "
            "WHERE disposed_at IS NULL AND legal_hold = false "
            "AND retain_until IS NOT NULL AND retain_until <= %s "
            "ORDER BY retain_until, id",
            (now,),
        )
        rows = await cur.fetchall()
        return [_row_to_record(r) for r in rows]

    async def update_verification(
        self, record_id: UUID, status: VerificationStatus, verified_at: datetime
    ) -> bool:
        """Set verification status and timestamp on an active record."""
        cur = await self._conn.execute(
            "UPDATE records SET verification_status = %s, last_verified_at = %s, updated_at = NOW() "
            "WHERE id = %s AND disposed_at IS NULL",
            (status.value, verified_at, record_id),
        )
        return cur.rowcount == 1

    async def update_legal_hold(self, record: Record) -> bool:
        """Persist legal hold fields on an active record."""
        cur = await self._conn.execute(
            "UPDATE records SET legal_hold = %s, legal_hold_reason = %s, legal_hold_by = %s, "
            "legal_hold_at = %s, updated_at = NOW() WHERE id = %s AND disposed_at IS NULL",
            (
                record.legal_hold,
                record.legal_hold_reason,
                record.legal_hold_by,
                record.legal_hold_at,
                record.id,
            ),
        )
        return cur.rowcount == 1

    async def mark_disposed(
        self, record_id: UUID, disposed_at: datetime, disposed_by: str, reason: str
    ) -> bool:
        """Mark record disposed unless it is held or already disposed."""
        cur = await self._conn.execute(
            "UPDATE records SET disposed_at = %s, disposed_by = %s, disposal_reason = %s, "
            "updated_at = NOW() "
            "WHERE id = %s AND disposed_at IS NULL AND legal_hold = false",
            (disposed_at, disposed_by, reason, record_id),
        )
        return cur.rowcount == 1
