"""PostgreSQL camp repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from campdesk.domain.entities import Camp

_COLUMNS = (
    "id, organization_id, name, start_date, end_date, registration_start_date, "
    "registration_end_date, capacity, waitlist_enabled, slug, created_by, "
    "is_deleted, is_cancelled"
)


def _to_camp(r: tuple) -> Camp:
    return Camp(
        id=r[0],
        organization_id=r[1],
        name=r[2],
        start_date=r[3],
        end_date=r[4],
        registration_start_date=r[5],
        registration_end_date=r[6],
        capacity=r[7],
        waitlist_enabled=r[8],
        slug=r[9],
        created_by=r[10],
        is_deleted=r[11],
        is_cancelled=r[12],
    )


class PostgresCampRepository:
    """Camp repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, camp_id: UUID) -> Camp | None:
        """Get camp by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM camp WHERE id = %s",
            (camp_id,),
        )
        r = await cur.fetchone()
        return _to_camp(r) if r else None

    async def get_for_update(self, camp_id: UUID) -> Camp | None:
        """Get camp and lock its row until the transaction ends."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM camp WHERE id = %s FOR UPDATE",
            (camp_id,),
        )
        r = await cur.fetchone()
        return _to_camp(r) if r else None

    async def list_by_organization(self, organization_id: UUID) -> list[Camp]:
        """List camps of organization by start date."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM camp WHERE organization_id = %s "
            "ORDER BY start_date NULLS LAST, name",
            (organization_id,),
        )
        rows = await cur.fetchall()
        return [_to_camp(r) for r in rows]
