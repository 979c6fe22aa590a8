"""Remove permission entry use case."""

from uuid import UUID

from campdesk.application.use_cases.access import ensure_permission_admin, load_actor
from campdesk.domain.exceptions import NotFound


class RemovePermissionEntryUseCase:
    """Remove a grant; the action becomes implicitly denied for the set."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, actor_id: str, entry_id: UUID) -> None:
        async with self._uow_factory() as uow:
            actor = await load_actor(uow, actor_id)
            entry = await uow.permission_sets.get_entry(entry_id)
            if not entry:
                raise NotFound("Permission", str(entry_id))
            permission_set = await uow.permission_sets.get_by_id(entry.permission_set_id)
            if not permission_set:
                raise NotFound("PermissionSet", str(entry.permission_set_id))
            ensure_permission_admin(actor, permission_set.organization_id)
            await uow.permission_sets.delete_entry(entry_id)
