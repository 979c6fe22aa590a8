"""Permission set repository port."""

from typing import Protocol
from uuid import UUID

from campdesk.domain.entities import PermissionEntry, PermissionSet


class PermissionSetRepository(Protocol):
    """Port for permission set and entry persistence."""

    async def get_by_id(self, permission_set_id: UUID) -> PermissionSet | None: ...

    async def list_by_organization(self, organization_id: UUID) -> list[PermissionSet]: ...

    async def create(self, permission_set: PermissionSet) -> PermissionSet: ...

    async def update(self, permission_set: PermissionSet) -> None: ...

    async def delete(self, permission_set_id: UUID) -> None: ...

    async def get_entry(self, entry_id: UUID) -> PermissionEntry | None: ...

    async def add_entry(self, entry: PermissionEntry) -> PermissionEntry: ...

    async def update_entry(self, entry: PermissionEntry) -> None: ...

    async def delete_entry(self, entry_id: UUID) -> None: ...
