"""Repository ports."""

from campdesk.application.ports.repositories.camp_repository import CampRepository
from campdesk.application.ports.repositories.child_repository import ChildRepository
from campdesk.application.ports.repositories.permission_set_repository import (
    PermissionSetRepository,
)
from campdesk.application.ports.repositories.registration_repository import (
    RegistrationRepository,
)
from campdesk.application.ports.repositories.user_permission_repository import (
    UserPermissionRepository,
)
from campdesk.application.ports.repositories.user_repository import UserRepository

__all__ = [
    "CampRepository",
    "ChildRepository",
    "PermissionSetRepository",
    "RegistrationRepository",
    "UserPermissionRepository",
    "UserRepository",
]
