"""Camp DTOs."""

from dataclasses import dataclass, field

from campdesk.domain.entities import Camp, Registration
from campdesk.domain.value_objects import RegistrationStatus


@dataclass
class CampOutput:
    """Camp with derived status and the caller's management flag."""

    camp: Camp
    registration_count: int
    registration_status: RegistrationStatus
    can_manage: bool


@dataclass
class CampRegistrationsOutput:
    registrations: list[Registration] = field(default_factory=list)
    can_manage: bool = False
    can_view_all: bool = False
