"""PostgreSQL user repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from campdesk.domain.entities import User
from campdesk.domain.value_objects import UserRole

_COLUMNS = "id, username, email, role, organization_id, subject, first_name, last_name"


def _to_user(r: tuple) -> User:
    return User(
        id=r[0],
        username=r[1],
        email=r[2],
        role=UserRole.parse(r[3]),
        organization_id=r[4],
        subject=r[5],
        first_name=r[6],
        last_name=r[7],
    )


class PostgresUserRepository:
    """User repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, user_id: UUID) -> User | None:
        """Get user by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM app_user WHERE id = %s",
            (user_id,),
        )
        r = await cur.fetchone()
        return _to_user(r) if r else None

    async def get_by_subject(self, subject: str) -> User | None:
        """Get user by auth subject (OIDC sub)."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM app_user WHERE subject = %s",
            (subject,),
        )
        r = await cur.fetchone()
        return _to_user(r) if r else None

    async def list_by_organization(self, organization_id: UUID) -> list[User]:
        """List users of organization."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM app_user WHERE organization_id = %s ORDER BY username",
            (organization_id,),
        )
        rows = await cur.fetchall()
        return [_to_user(r) for r in rows]
