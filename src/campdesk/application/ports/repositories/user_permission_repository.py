"""User permission (set assignment) repository port."""

from typing import Protocol
from uuid import UUID

from campdesk.domain.entities import UserPermission


class UserPermissionRepository(Protocol):
    """Port for user permission set assignments."""

    async def get_by_id(self, user_permission_id: UUID) -> UserPermission | None: ...

    async def list_by_user(self, user_id: UUID) -> list[UserPermission]: ...

    async def list_by_organization(self, organization_id: UUID) -> list[UserPermission]: ...

    async def create(self, user_permission: UserPermission) -> UserPermission: ...

    async def delete(self, user_permission_id: UUID) -> None: ...
