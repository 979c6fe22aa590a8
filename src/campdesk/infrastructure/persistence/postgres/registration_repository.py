"""PostgreSQL registration repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from campdesk.domain.entities import Registration

_COLUMNS = "id, camp_id, child_id, parent_id, registered_at, paid, waitlisted"


def _to_registration(r: tuple) -> Registration:
    return Registration(
        id=r[0],
        camp_id=r[1],
        child_id=r[2],
        parent_id=r[3],
        registered_at=r[4],
        paid=r[5],
        waitlisted=r[6],
    )


class PostgresRegistrationRepository:
    """Registration repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def _list_where(self, column: str, value: UUID) -> list[Registration]:
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM registration WHERE {column} = %s ORDER BY registered_at",
            (value,),
        )
        rows = await cur.fetchall()
        return [_to_registration(r) for r in rows]

    async def list_by_camp(self, camp_id: UUID) -> list[Registration]:
        """List registrations of camp."""
        return await self._list_where("camp_id", camp_id)

    async def list_by_parent(self, parent_id: UUID) -> list[Registration]:
        """List registrations made by parent."""
        return await self._list_where("parent_id", parent_id)

    async def list_by_child(self, child_id: UUID) -> list[Registration]:
        """List registrations of child."""
        return await self._list_where("child_id", child_id)

    async def count_active(self, camp_id: UUID) -> int:
        """Count registrations holding a seat (waitlisted ones excluded)."""
        cur = await self._conn.execute(
            "SELECT count(*) FROM registration WHERE camp_id = %s AND NOT waitlisted",
            (camp_id,),
        )
        r = await cur.fetchone()
        return r[0] if r else 0

    async def create(self, registration: Registration) -> Registration:
        """Create registration."""
        await self._conn.execute(
            f"INSERT INTO registration ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s)",
            (
                registration.id,
                registration.camp_id,
                registration.child_id,
                registration.parent_id,
                registration.registered_at,
                registration.paid,
                registration.waitlisted,
            ),
        )
        return registration
