"""Get camp use case."""

from datetime import UTC, datetime
from uuid import UUID

from campdesk.application.dto.camp_dto import CampOutput
from campdesk.application.ports import PermissionChecker
from campdesk.domain.entities import Camp, User
from campdesk.domain.exceptions import NotFound
from campdesk.domain.services import compute_registration_status
from campdesk.domain.value_objects import PermissionAction, PermissionResource


async def can_manage_camp(
    permission_checker: PermissionChecker, actor: User | None, camp: Camp
) -> bool:
    """Same organization and camps:edit allowed."""
    if actor is None or actor.organization_id != camp.organization_id:
        return False
    return await permission_checker.check(
        actor, PermissionResource.CAMPS, PermissionAction.EDIT
    )


class GetCampUseCase:
    """Get a camp with its live registration status and the caller's canManage flag."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(
        self,
        actor_id: str | None,
        camp_id: UUID,
        now: datetime | None = None,
    ) -> CampOutput:
        """Anonymous callers may view camps; they never manage them."""
        async with self._uow_factory() as uow:
            camp = await uow.camps.get_by_id(camp_id)
            if not camp or camp.is_deleted:
                raise NotFound("Camp", str(camp_id))
            count = await uow.registrations.count_active(camp_id)
            actor = await uow.users.get_by_subject(actor_id) if actor_id else None

        status = compute_registration_status(camp, count, now or datetime.now(UTC))
        return CampOutput(
            camp=camp,
            registration_count=count,
            registration_status=status,
            can_manage=await can_manage_camp(self._permission_checker, actor, camp),
        )
