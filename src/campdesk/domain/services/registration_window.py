"""Camp registration status from capacity and registration window."""

from datetime import UTC, datetime

from campdesk.domain.entities import Camp
from campdesk.domain.value_objects import RegistrationStatus


def _aware(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=UTC)


def compute_registration_status(
    camp: Camp, registration_count: int, now: datetime
) -> RegistrationStatus:
    """Classify a camp's availability at `now`. First matching rule wins.

    Comparisons are strict, so a camp is still open at the exact instant its
    registration window ends.
    """
    if (
        camp.registration_start_date is None
        or camp.registration_end_date is None
        or camp.start_date is None
    ):
        return RegistrationStatus.UNKNOWN

    now = _aware(now)
    if now > _aware(camp.registration_end_date):
        return RegistrationStatus.CLOSED
    if now > _aware(camp.start_date):
        return RegistrationStatus.IN_PROGRESS
    if now < _aware(camp.registration_start_date):
        return RegistrationStatus.NOT_OPEN
    if registration_count >= camp.capacity:
        if camp.waitlist_enabled:
            return RegistrationStatus.WAITLIST
        return RegistrationStatus.FULL
    return RegistrationStatus.OPEN
