"""PostgreSQL child repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from campdesk.domain.entities import Child

_COLUMNS = "id, parent_id, full_name, date_of_birth"


def _to_child(r: tuple) -> Child:
    return Child(id=r[0], parent_id=r[1], full_name=r[2], date_of_birth=r[3])


class PostgresChildRepository:
    """Child repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, child_id: UUID) -> Child | None:
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM child WHERE id = %s",
            (child_id,),
        )
        r = await cur.fetchone()
        return _to_child(r) if r else None
