"""List team members use case."""

from uuid import UUID

from campdesk.application.use_cases.access import ensure_member, load_actor
from campdesk.domain.entities import User
from campdesk.domain.value_objects import UserRole


class ListTeamMembersUseCase:
    """List organization staff (everyone except parents)."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, actor_id: str, organization_id: UUID) -> list[User]:
        async with self._uow_factory() as uow:
            actor = await load_actor(uow, actor_id)
            ensure_member(actor, organization_id)
            users = await uow.users.list_by_organization(organization_id)
        return [u for u in users if u.role != UserRole.PARENT]
