"""Dashboard DTOs."""

from dataclasses import dataclass, field

from campdesk.domain.entities import Camp, Registration
from campdesk.domain.value_objects import RegistrationStatus


@dataclass
class CampSummary:
    camp: Camp
    registration_count: int
    status: RegistrationStatus


@dataclass
class Dashboard:
    """Role-specific landing data. kind names the builder that produced it."""

    kind: str
    role: str
    camps: list[CampSummary] = field(default_factory=list)
    registrations: list[Registration] = field(default_factory=list)
    message: str | None = None
