"""PostgreSQL disposal repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from recordkeeper.domain.entities import RecordDisposal


class PostgresDisposalRepository:
    """Disposal audit repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def create(self, disposal: RecordDisposal) -> RecordDisposal:
        """Append disposal entry."""
        await self._conn.execute(
            "INSERT INTO record_disposals (id, record_id, record_number, filename, "
            "disposed_at, disposed_by, reason, content_deleted) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s)",
            (
                disposal.id,
                disposal.record_id,
                disposal.record_number,
                disposal.filename,
                disposal.disposed_at,
                disposal.disposed_by,
                disposal.reason,
                disposal.content_deleted,
            ),
        )
        return disposal

    async def mark_content_deleted(self, disposal_id: UUID) -> None:
        """Set content_deleted once the archived file is gone."""
        await self._conn.execute(
            "UPDATE record_disposals SET content_deleted = true "
            "WHERE id = %s AND content_deleted = false",
            (disposal_id,),
        )

    async def list_recent(self, limit: int = 10) -> list[RecordDisposal]:
        """Latest disposals, newest first."""
        cur = await self._conn.execute(
            "SELECT id, record_id, record_number, filename, disposed_at, disposed_by, "
            "reason, content_deleted FROM record_disposals "
            "ORDER BY disposed_at DESC LIMIT %s",
            (limit,),
        )
        rows = await cur.fetchall()
        return [
            RecordDisposal(
                id=r[0],
                record_id=r[1],
                record_number=r[2],
                filename=r[3],
                disposed_at=r[4],
                disposed_by=r[5],
                reason=r[6],
                content_deleted=r[7],
            )
            for r in rows
        ]
