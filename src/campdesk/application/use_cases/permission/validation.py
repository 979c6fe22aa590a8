"""Validation of permission input values."""

from campdesk.application.dto.permission_input import (
    PermissionEntryInput,
    PermissionSetInput,
)
from campdesk.domain.exceptions import ValidationError
from campdesk.domain.value_objects import (
    PermissionAction,
    PermissionResource,
    PermissionScope,
    UserRole,
)

_RESOURCES = {r.value for r in PermissionResource}
_ACTIONS = {a.value for a in PermissionAction}
_SCOPES = {s.value for s in PermissionScope}


def parse_default_role(data: PermissionSetInput) -> UserRole | None:
    """Validate set fields and return the role it is default for, if any."""
    if not data.name or not data.name.strip():
        raise ValidationError("Permission set name is required")
    if data.default_for_role is None:
        if data.is_default:
            raise ValidationError("Default permission sets need defaultForRole")
        return None
    role = UserRole.parse(data.default_for_role)
    if role == UserRole.UNKNOWN:
        raise ValidationError(f"Unknown role: {data.default_for_role}")
    return role


def validate_entry(data: PermissionEntryInput) -> None:
    if data.resource not in _RESOURCES:
        raise ValidationError(f"Unknown resource: {data.resource}")
    if data.action not in _ACTIONS:
        raise ValidationError(f"Unknown action: {data.action}")
    if data.scope not in _SCOPES:
        raise ValidationError(f"Unknown scope: {data.scope}")
