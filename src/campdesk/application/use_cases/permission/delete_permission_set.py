"""Delete permission set use case."""

from uuid import UUID

from campdesk.application.use_cases.access import ensure_permission_admin, load_actor
from campdesk.domain.exceptions import NotFound


class DeletePermissionSetUseCase:
    """Delete a permission set; its entries and user assignments go with it."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, actor_id: str, permission_set_id: UUID) -> None:
        async with self._uow_factory() as uow:
            actor = await load_actor(uow, actor_id)
            permission_set = await uow.permission_sets.get_by_id(permission_set_id)
            if not permission_set:
                raise NotFound("PermissionSet", str(permission_set_id))
            ensure_permission_admin(actor, permission_set.organization_id)
            await uow.permission_sets.delete(permission_set_id)
