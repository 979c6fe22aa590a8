"""Permission summary use case - by resource, by role and by user."""

from enum import StrEnum
from uuid import UUID

from campdesk.application.dto.permission_summary import (
    ResourceGroup,
    RoleGroup,
    UserGroup,
)
from campdesk.application.services.permission_projections import (
    group_by_resource,
    group_by_role,
    group_by_user,
)
from campdesk.application.use_cases.access import ensure_member, load_actor
from campdesk.domain.exceptions import ValidationError
from campdesk.domain.value_objects import UserRole


class SummaryView(StrEnum):
    RESOURCE = "resource"
    ROLE = "role"
    USER = "user"


class SummarizePermissionsUseCase:
    """Build one projection of an organization's permission sets."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        actor_id: str,
        organization_id: UUID,
        view: str = SummaryView.RESOURCE,
    ) -> list[ResourceGroup] | list[RoleGroup] | list[UserGroup]:
        try:
            view = SummaryView(view)
        except ValueError:
            raise ValidationError(f"Unknown summary view: {view}") from None

        if view == SummaryView.USER:
            return await self.by_user(actor_id, organization_id)

        async with self._uow_factory() as uow:
            actor = await load_actor(uow, actor_id)
            ensure_member(actor, organization_id)
            sets = await uow.permission_sets.list_by_organization(organization_id)

        if view == SummaryView.ROLE:
            return group_by_role(sets)
        return group_by_resource(sets)

    async def by_user(self, actor_id: str, organization_id: UUID) -> list[UserGroup]:
        """Team members with their assigned sets. Parents are not team members."""
        async with self._uow_factory() as uow:
            actor = await load_actor(uow, actor_id)
            ensure_member(actor, organization_id)
            sets = await uow.permission_sets.list_by_organization(organization_id)
            members = [
                m
                for m in await uow.users.list_by_organization(organization_id)
                if m.role != UserRole.PARENT
            ]
            assignments = await uow.user_permissions.list_by_organization(organization_id)

        return group_by_user(members, sets, assignments)
