"""Update permission set use case."""

from datetime import UTC, datetime
from uuid import UUID

from campdesk.application.dto.permission_input import PermissionSetInput
from campdesk.application.use_cases.access import ensure_permission_admin, load_actor
from campdesk.application.use_cases.permission.validation import parse_default_role
from campdesk.domain.entities import PermissionSet
from campdesk.domain.exceptions import NotFound


class UpdatePermissionSetUseCase:
    """Rename a permission set or change its default role."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        actor_id: str,
        permission_set_id: UUID,
        data: PermissionSetInput,
    ) -> PermissionSet:
        role = parse_default_role(data)

        async with self._uow_factory() as uow:
            actor = await load_actor(uow, actor_id)
            permission_set = await uow.permission_sets.get_by_id(permission_set_id)
            if not permission_set:
                raise NotFound("PermissionSet", str(permission_set_id))
            ensure_permission_admin(actor, permission_set.organization_id)

            if data.is_default and role:
                sets = await uow.permission_sets.list_by_organization(
                    permission_set.organization_id
                )
                for other in sets:
                    if other.id != permission_set.id and other.is_default_for(role):
                        other.is_default = False
                        await uow.permission_sets.update(other)

            permission_set.name = data.name.strip()
            permission_set.description = data.description
            permission_set.is_default = data.is_default
            permission_set.default_for_role = role
            permission_set.updated_at = datetime.now(UTC)
            await uow.permission_sets.update(permission_set)
            return permission_set
