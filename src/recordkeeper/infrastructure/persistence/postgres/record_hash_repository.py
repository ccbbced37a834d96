"""PostgreSQL record hash repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from recordkeeper.domain.entities import RecordHash

_COLUMNS = (
    "id, record_id, computed_hash, expected_hash, matched, verified_at, verified_by, "
    "file_exists, file_size, error"
)


def _row_to_record_hash(r: tuple) -> RecordHash:
    return RecordHash(
        id=r[0],
        record_id=r[1],
        computed_hash=r[2],
        expected_hash=r[3],
        matched=r[4],
        verified_at=r[5],
        verified_by=r[6],
        file_exists=r[7],
        file_size=r[8],
        error=r[9],
    )


class PostgresRecordHashRepository:
    """Record hash repository implementation. Insert and read only."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def create(self, record_hash: RecordHash) -> RecordHash:
        """Append verification entry."""
        await self._conn.execute(
            f"INSERT INTO record_hashes ({_COLUMNS}) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s)",
            (
                record_hash.id,
                record_hash.record_id,
                record_hash.computed_hash,
                record_hash.expected_hash,
                record_hash.matched,
                record_hash.verified_at,
                record_hash.verified_by,
                record_hash.file_exists,
                record_hash.file_size,
                record_hash.error,
            ),
        )
        return record_hash

    async def list_by_record(self, record_id: UUID, limit: int = 10) -> list[RecordHash]:
        """Latest entries for one record."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM record_hashes WHERE record_id = %s "
            "ORDER BY verified_at DESC LIMIT %s",
            (record_id, limit),
        )
        rows = await cur.fetchall()
        return [_row_to_record_hash(r) for r in rows]

    async def list_recent(self, limit: int = 10) -> list[RecordHash]:
        """Latest entries across all records."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM record_hashes ORDER BY verified_at DESC LIMIT %s",
            (limit,),
        )
        rows = await cur.fetchall()
        return [_row_to_record_hash(r) for r in rows]
