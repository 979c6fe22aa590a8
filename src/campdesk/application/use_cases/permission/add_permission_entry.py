"""Add permission entry use case."""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from campdesk.application.dto.permission_input import PermissionEntryInput
from campdesk.application.use_cases.access import ensure_permission_admin, load_actor
from campdesk.application.use_cases.permission.validation import validate_entry
from campdesk.domain.entities import PermissionEntry
from campdesk.domain.exceptions import DuplicatePermission, NotFound


class AddPermissionEntryUseCase:
    """Add a resource/action grant to a permission set."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        actor_id: str,
        permission_set_id: UUID,
        data: PermissionEntryInput,
    ) -> PermissionEntry:
        """Add entry. (resource, action) must not already exist in the set."""
        validate_entry(data)

        async with self._uow_factory() as uow:
            actor = await load_actor(uow, actor_id)
            permission_set = await uow.permission_sets.get_by_id(permission_set_id)
            if not permission_set:
                raise NotFound("PermissionSet", str(permission_set_id))
            ensure_permission_admin(actor, permission_set.organization_id)

            if permission_set.find_entry(data.resource, data.action):
                raise DuplicatePermission(
                    f"Permission set already has {data.resource}:{data.action}"
                )

            entry = PermissionEntry(
                id=uuid4(),
                permission_set_id=permission_set_id,
                resource=data.resource,
                action=data.action,
                allowed=data.allowed,
                scope=data.scope,
            )
            await uow.permission_sets.add_entry(entry)
            permission_set.updated_at = datetime.now(UTC)
            await uow.permission_sets.update(permission_set)
            return entry
