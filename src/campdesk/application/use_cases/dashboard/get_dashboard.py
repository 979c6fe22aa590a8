"""Dashboard use case - dispatches on the caller's role."""

from collections.abc import Awaitable, Callable
from datetime import UTC, datetime

from campdesk.application.dto.dashboard import CampSummary, Dashboard
from campdesk.application.ports import UnitOfWork
from campdesk.application.use_cases.access import load_actor
from campdesk.domain.entities import User
from campdesk.domain.services import compute_registration_status
from campdesk.domain.value_objects import UserRole

DashboardBuilder = Callable[[UnitOfWork, User, datetime], Awaitable[Dashboard]]


async def _organization_camps(uow: UnitOfWork, user: User, now: datetime) -> list[CampSummary]:
    if user.organization_id is None:
        return []
    summaries = []
    for camp in await uow.camps.list_by_organization(user.organization_id):
        if camp.is_deleted:
            continue
        count = await uow.registrations.count_active(camp.id)
        summaries.append(
            CampSummary(
                camp=camp,
                registration_count=count,
                status=compute_registration_status(camp, count, now),
            )
        )
    return summaries


async def _parent_dashboard(uow: UnitOfWork, user: User, now: datetime) -> Dashboard:
    return Dashboard(
        kind="parent",
        role=user.role.value,
        registrations=await uow.registrations.list_by_parent(user.id),
    )


async def _creator_dashboard(uow: UnitOfWork, user: User, now: datetime) -> Dashboard:
    return Dashboard(
        kind="organization_admin",
        role=user.role.value,
        camps=await _organization_camps(uow, user, now),
    )


async def _staff_dashboard(uow: UnitOfWork, user: User, now: datetime) -> Dashboard:
    return Dashboard(
        kind="staff",
        role=user.role.value,
        camps=await _organization_camps(uow, user, now),
    )


async def _athlete_dashboard(uow: UnitOfWork, user: User, now: datetime) -> Dashboard:
    return Dashboard(
        kind="athlete",
        role=user.role.value,
        registrations=await uow.registrations.list_by_child(user.id),
    )


async def _unknown_role_dashboard(uow: UnitOfWork, user: User, now: datetime) -> Dashboard:
    return Dashboard(
        kind="unknown_role",
        role=user.role.value,
        message="Your account role needs to be updated. Please contact your organization.",
    )


DASHBOARD_BUILDERS: dict[UserRole, DashboardBuilder] = {
    UserRole.PARENT: _parent_dashboard,
    UserRole.CAMP_CREATOR: _creator_dashboard,
    UserRole.MANAGER: _creator_dashboard,
    UserRole.COACH: _staff_dashboard,
    UserRole.VOLUNTEER: _staff_dashboard,
    UserRole.ATHLETE: _athlete_dashboard,
    UserRole.UNKNOWN: _unknown_role_dashboard,
}


class GetDashboardUseCase:
    """Build the landing dashboard for the caller's role."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, actor_id: str, now: datetime | None = None) -> Dashboard:
        now = now or datetime.now(UTC)
        async with self._uow_factory() as uow:
            actor = await load_actor(uow, actor_id)
            builder = DASHBOARD_BUILDERS.get(actor.role, _unknown_role_dashboard)
            return await builder(uow, actor, now)
