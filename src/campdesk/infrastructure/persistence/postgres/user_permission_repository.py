"""PostgreSQL user permission repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from campdesk.domain.entities import UserPermission


class PostgresUserPermissionRepository:
    """User permission (set assignment) repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, user_permission_id: UUID) -> UserPermission | None:
        """Get assignment by id."""
        cur = await self._conn.execute(
            "SELECT id, user_id, permission_set_id, created_at, updated_at "
            "FROM user_permission WHERE id = %s",
            (user_permission_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return UserPermission(
            id=r[0], user_id=r[1], permission_set_id=r[2], created_at=r[3], updated_at=r[4]
        )

    async def list_by_user(self, user_id: UUID) -> list[UserPermission]:
        """List assignments for user, oldest first."""
        cur = await self._conn.execute(
            "SELECT id, user_id, permission_set_id, created_at, updated_at "
            "FROM user_permission WHERE user_id = %s ORDER BY created_at",
            (user_id,),
        )
        rows = await cur.fetchall()
        return [
            UserPermission(
                id=r[0], user_id=r[1], permission_set_id=r[2], created_at=r[3], updated_at=r[4]
            )
            for r in rows
        ]

    async def list_by_organization(self, organization_id: UUID) -> list[UserPermission]:
        """List assignments of all members of organization."""
        cur = await self._conn.execute(
            "SELECT up.id, up.user_id, up.permission_set_id, up.created_at, up.updated_at "
            "FROM user_permission up JOIN app_user u ON u.id = up.user_id "
            "WHERE u.organization_id = %s ORDER BY up.created_at",
            (organization_id,),
        )
        rows = await cur.fetchall()
        return [
            UserPermission(
                id=r[0], user_id=r[1], permission_set_id=r[2], created_at=r[3], updated_at=r[4]
            )
            for r in rows
        ]

    async def create(self, user_permission: UserPermission) -> UserPermission:
        """Create assignment."""
        await self._conn.execute(
            "INSERT INTO user_permission (id, user_id, permission_set_id, created_at, updated_at) "
            "VALUES (%s, %s, %s, %s, %s)",
            (
                user_permission.id,
                user_permission.user_id,
                user_permission.permission_set_id,
                user_permission.created_at,
                user_permission.updated_at,
            ),
        )
        return user_permission

    async def delete(self, user_permission_id: UUID) -> None:
        """Delete assignment."""
        await self._conn.execute(
            "DELETE FROM user_permission WHERE id = %s",
            (user_permission_id,),
        )
