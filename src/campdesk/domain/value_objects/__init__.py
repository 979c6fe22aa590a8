"""Domain value objects."""

from campdesk.domain.value_objects.permission_resource import (
    PermissionAction,
    PermissionResource,
    PermissionScope,
    action_label,
    resource_label,
    scope_label,
)
from campdesk.domain.value_objects.registration_status import RegistrationStatus
from campdesk.domain.value_objects.user_role import UserRole, format_role

__all__ = [
    "PermissionAction",
    "PermissionResource",
    "PermissionScope",
    "RegistrationStatus",
    "UserRole",
    "action_label",
    "format_role",
    "resource_label",
    "scope_label",
]
