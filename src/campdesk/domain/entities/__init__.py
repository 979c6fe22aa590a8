"""Domain entities."""

from campdesk.domain.entities.camp import Camp
from campdesk.domain.entities.child import Child
from campdesk.domain.entities.permission_set import PermissionEntry, PermissionSet
from campdesk.domain.entities.registration import Registration
from campdesk.domain.entities.user import User
from campdesk.domain.entities.user_permission import UserPermission

__all__ = [
    "Camp",
    "Child",
    "PermissionEntry",
    "PermissionSet",
    "Registration",
    "User",
    "UserPermission",
]
