"""Revoke permission set use case."""

from uuid import UUID

from campdesk.application.use_cases.access import ensure_permission_admin, load_actor
from campdesk.domain.exceptions import NotFound


class RevokePermissionSetUseCase:
    """Remove an explicit assignment; the user falls back to role defaults."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        actor_id: str,
        user_id: UUID,
        user_permission_id: UUID,
    ) -> None:
        async with self._uow_factory() as uow:
            actor = await load_actor(uow, actor_id)
            user_permission = await uow.user_permissions.get_by_id(user_permission_id)
            if not user_permission or user_permission.user_id != user_id:
                raise NotFound("UserPermission", str(user_permission_id))
            user = await uow.users.get_by_id(user_id)
            if not user or user.organization_id is None:
                raise NotFound("User", str(user_id))
            ensure_permission_admin(actor, user.organization_id)
            await uow.user_permissions.delete(user_permission_id)
