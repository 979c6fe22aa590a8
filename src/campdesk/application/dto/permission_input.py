"""Permission input DTOs."""

from dataclasses import dataclass


@dataclass
class PermissionSetInput:
    """Fields for creating or updating a permission set."""

    name: str
    description: str | None = None
    is_default: bool = False
    default_for_role: str | None = None


@dataclass
class PermissionEntryInput:
    resource: str
    action: str
    allowed: bool = False
    scope: str = "organization"
