"""List camp registrations use case."""

from uuid import UUID

from campdesk.application.dto.camp_dto import CampRegistrationsOutput
from campdesk.application.ports import PermissionChecker
from campdesk.application.use_cases.access import load_actor
from campdesk.application.use_cases.camp.get_camp import can_manage_camp
from campdesk.domain.exceptions import NotFound, PermissionDenied
from campdesk.domain.services import EffectivePermission, ScopePolicy
from campdesk.domain.value_objects import (
    PermissionAction,
    PermissionResource,
    PermissionScope,
    UserRole,
)


class ListCampRegistrationsUseCase:
    """List the registrations of a camp that the caller's scope covers."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
        scope_policy: ScopePolicy | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker
        self._scope_policy = scope_policy or ScopePolicy()

    async def execute(self, actor_id: str, camp_id: UUID) -> CampRegistrationsOutput:
        async with self._uow_factory() as uow:
            actor = await load_actor(uow, actor_id)
            camp = await uow.camps.get_by_id(camp_id)
            if not camp or camp.is_deleted:
                raise NotFound("Camp", str(camp_id))
            registrations = await uow.registrations.list_by_camp(camp_id)

        # Parents hold no organization sets; they always see their own children.
        if actor.role == UserRole.PARENT:
            effective = EffectivePermission(allowed=True, scope=PermissionScope.OWN)
        else:
            effective = await self._permission_checker.resolve(
                actor, PermissionResource.REGISTRATIONS, PermissionAction.VIEW
            )
        if not effective.allowed:
            raise PermissionDenied("User does not have access to registrations")

        visible = [
            r
            for r in registrations
            if self._scope_policy.in_scope(
                effective,
                actor,
                PermissionResource.REGISTRATIONS,
                r,
                camp.organization_id,
            )
        ]
        return CampRegistrationsOutput(
            registrations=visible,
            can_manage=await can_manage_camp(self._permission_checker, actor, camp),
            can_view_all=len(visible) == len(registrations)
            and effective.scope != PermissionScope.OWN,
        )
