"""PostgreSQL permission set repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from campdesk.domain.entities import PermissionEntry, PermissionSet
from campdesk.domain.value_objects import UserRole

_SET_COLUMNS = (
    "id, organization_id, name, description, is_default, default_for_role, "
    "created_at, updated_at"
)
_ENTRY_COLUMNS = "id, permission_set_id, resource, action, allowed, scope"


def _to_set(r: tuple) -> PermissionSet:
    return PermissionSet(
        id=r[0],
        organization_id=r[1],
        name=r[2],
        description=r[3],
        is_default=r[4],
        default_for_role=UserRole.parse(r[5]) if r[5] else None,
        created_at=r[6],
        updated_at=r[7],
    )


def _to_entry(r: tuple) -> PermissionEntry:
    return PermissionEntry(
        id=r[0],
        permission_set_id=r[1],
        resource=r[2],
        action=r[3],
        allowed=r[4],
        scope=r[5],
    )


class PostgresPermissionSetRepository:
    """Permission set repository implementation. Sets are loaded with their entries."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def _load_entries(self, sets: list[PermissionSet]) -> list[PermissionSet]:
        if not sets:
            return sets
        by_id = {s.id: s for s in sets}
        cur = await self._conn.execute(
            f"SELECT {_ENTRY_COLUMNS} FROM permission "
            "WHERE permission_set_id = ANY(%s) ORDER BY resource, action",
            (list(by_id),),
        )
        for r in await cur.fetchall():
            entry = _to_entry(r)
            by_id[entry.permission_set_id].permissions.append(entry)
        return sets

    async def get_by_id(self, permission_set_id: UUID) -> PermissionSet | None:
        """Get permission set by id."""
        cur = await self._conn.execute(
            f"SELECT {_SET_COLUMNS} FROM permission_set WHERE id = %s",
            (permission_set_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return (await self._load_entries([_to_set(r)]))[0]

    async def list_by_organization(self, organization_id: UUID) -> list[PermissionSet]:
        """List permission sets of organization, oldest first."""
        cur = await self._conn.execute(
            f"SELECT {_SET_COLUMNS} FROM permission_set "
            "WHERE organization_id = %s ORDER BY created_at, id",
            (organization_id,),
        )
        rows = await cur.fetchall()
        return await self._load_entries([_to_set(r) for r in rows])

    async def create(self, permission_set: PermissionSet) -> PermissionSet:
        """Create permission set."""
        await self._conn.execute(
            f"INSERT INTO permission_set ({_SET_COLUMNS}) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s)",
            (
                permission_set.id,
                permission_set.organization_id,
                permission_set.name,
                permission_set.description,
                permission_set.is_default,
                permission_set.default_for_role.value if permission_set.default_for_role else None,
                permission_set.created_at,
                permission_set.updated_at,
            ),
        )
        return permission_set

    async def update(self, permission_set: PermissionSet) -> None:
        """Update permission set fields (not its entries)."""
        await self._conn.execute(
            "UPDATE permission_set SET name=%s, description=%s, is_default=%s, "
            "default_for_role=%s, updated_at=%s WHERE id=%s",
            (
                permission_set.name,
                permission_set.description,
                permission_set.is_default,
                permission_set.default_for_role.value if permission_set.default_for_role else None,
                permission_set.updated_at,
                permission_set.id,
            ),
        )

    async def delete(self, permission_set_id: UUID) -> None:
        """Delete permission set. Entries and assignments cascade."""
        await self._conn.execute(
            "DELETE FROM permission_set WHERE id = %s",
            (permission_set_id,),
        )

    async def get_entry(self, entry_id: UUID) -> PermissionEntry | None:
        """Get permission entry by id."""
        cur = await self._conn.execute(
            f"SELECT {_ENTRY_COLUMNS} FROM permission WHERE id = %s",
            (entry_id,),
        )
        r = await cur.fetchone()
        return _to_entry(r) if r else None

    async def add_entry(self, entry: PermissionEntry) -> PermissionEntry:
        """Insert entry. (permission_set_id, resource, action) is unique in the schema."""
        await self._conn.execute(
            f"INSERT INTO permission ({_ENTRY_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s)",
            (
                entry.id,
                entry.permission_set_id,
                entry.resource,
                entry.action,
                entry.allowed,
                entry.scope,
            ),
        )
        return entry

    async def update_entry(self, entry: PermissionEntry) -> None:
        """Update permission entry."""
        await self._conn.execute(
            "UPDATE permission SET resource=%s, action=%s, allowed=%s, scope=%s WHERE id=%s",
            (entry.resource, entry.action, entry.allowed, entry.scope, entry.id),
        )

    async def delete_entry(self, entry_id: UUID) -> None:
        """Delete permission entry."""
        await self._conn.execute(
            "DELETE FROM permission WHERE id = %s",
            (entry_id,),
        )
