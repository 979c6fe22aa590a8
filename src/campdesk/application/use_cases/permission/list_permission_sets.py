"""List permission sets use case."""

from uuid import UUID

from campdesk.application.use_cases.access import ensure_member, load_actor
from campdesk.domain.entities import PermissionSet
from campdesk.domain.exceptions import NotFound


class ListPermissionSetsUseCase:
    """List an organization's permission sets with their entries."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, actor_id: str, organization_id: UUID) -> list[PermissionSet]:
        async with self._uow_factory() as uow:
            actor = await load_actor(uow, actor_id)
            ensure_member(actor, organization_id)
            return await uow.permission_sets.list_by_organization(organization_id)

    async def get(self, actor_id: str, permission_set_id: UUID) -> PermissionSet:
        """Get a single set, visible to members of its organization."""
        async with self._uow_factory() as uow:
            actor = await load_actor(uow, actor_id)
            permission_set = await uow.permission_sets.get_by_id(permission_set_id)
            if not permission_set:
                raise NotFound("PermissionSet", str(permission_set_id))
            ensure_member(actor, permission_set.organization_id)
            return permission_set
