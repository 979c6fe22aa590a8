"""Register athlete use case - authoritative capacity and window check."""

import logging
from datetime import UTC, datetime
from uuid import UUID, uuid4

from campdesk.application.use_cases.access import load_actor
from campdesk.domain.entities import Registration
from campdesk.domain.exceptions import (
    CampFull,
    NotFound,
    PermissionDenied,
    RegistrationClosed,
)
from campdesk.domain.services import compute_registration_status
from campdesk.domain.value_objects import RegistrationStatus, UserRole

logger = logging.getLogger(__name__)


class RegisterAthleteUseCase:
    """Register a parent's child for a camp.

    The camp row is locked for the transaction, so the count used for the
    capacity decision cannot change before the registration is written.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        actor_id: str,
        camp_id: UUID,
        child_id: UUID,
        now: datetime | None = None,
    ) -> Registration:
        now = now or datetime.now(UTC)
        async with self._uow_factory() as uow:
            actor = await load_actor(uow, actor_id)
            if actor.role != UserRole.PARENT:
                raise PermissionDenied("Only parents can register athletes")

            child = await uow.children.get_by_id(child_id)
            if not child or child.parent_id != actor.id:
                raise PermissionDenied("Not authorized for this child")

            camp = await uow.camps.get_for_update(camp_id)
            if not camp or camp.is_deleted:
                raise NotFound("Camp", str(camp_id))
            if camp.is_cancelled:
                raise RegistrationClosed("Camp has been cancelled")

            count = await uow.registrations.count_active(camp_id)
            status = compute_registration_status(camp, count, now)
            if status == RegistrationStatus.FULL:
                raise CampFull("Camp is full")
            if status not in (RegistrationStatus.OPEN, RegistrationStatus.WAITLIST):
                raise RegistrationClosed(f"Registration is {status.value.replace('_', ' ')}")

            registration = Registration(
                id=uuid4(),
                camp_id=camp_id,
                child_id=child_id,
                parent_id=actor.id,
                registered_at=now,
                waitlisted=status == RegistrationStatus.WAITLIST,
            )
            await uow.registrations.create(registration)

        logger.info(
            "Child %s registered for camp %s (waitlisted=%s)",
            child_id,
            camp_id,
            registration.waitlisted,
        )
        return registration
