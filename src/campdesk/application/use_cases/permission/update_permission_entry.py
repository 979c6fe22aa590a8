"""Update permission entry use case."""

from uuid import UUID

from campdesk.application.dto.permission_input import PermissionEntryInput
from campdesk.application.use_cases.access import ensure_permission_admin, load_actor
from campdesk.application.use_cases.permission.validation import validate_entry
from campdesk.domain.entities import PermissionEntry
from campdesk.domain.exceptions import DuplicatePermission, NotFound


class UpdatePermissionEntryUseCase:
    """Change a grant's resource, action, allowed flag or scope."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        actor_id: str,
        entry_id: UUID,
        data: PermissionEntryInput,
    ) -> PermissionEntry:
        validate_entry(data)

        async with self._uow_factory() as uow:
            actor = await load_actor(uow, actor_id)
            entry = await uow.permission_sets.get_entry(entry_id)
            if not entry:
                raise NotFound("Permission", str(entry_id))
            permission_set = await uow.permission_sets.get_by_id(entry.permission_set_id)
            if not permission_set:
                raise NotFound("PermissionSet", str(entry.permission_set_id))
            ensure_permission_admin(actor, permission_set.organization_id)

            clash = permission_set.find_entry(data.resource, data.action)
            if clash and clash.id != entry.id:
                raise DuplicatePermission(
                    f"Permission set already has {data.resource}:{data.action}"
                )

            entry.resource = data.resource
            entry.action = data.action
            entry.allowed = data.allowed
            entry.scope = data.scope
            await uow.permission_sets.update_entry(entry)
            return entry
