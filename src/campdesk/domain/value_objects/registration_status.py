"""Derived camp registration status."""

from enum import StrEnum


class RegistrationStatus(StrEnum):
    """Availability of a camp for new registrations. Never persisted."""

    NOT_OPEN = "not_open"
    OPEN = "open"
    FULL = "full"
    WAITLIST = "waitlist"
    CLOSED = "closed"
    IN_PROGRESS = "in_progress"
    UNKNOWN = "unknown"
