"""Permission set entity - named bundle of resource/action grants."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from campdesk.domain.value_objects import UserRole


@dataclass
class PermissionEntry:
    """Single grant: action on resource, allowed or denied, at a scope."""

    id: UUID
    permission_set_id: UUID
    resource: str
    action: str
    allowed: bool
    scope: str


@dataclass
class PermissionSet:
    """Organization-owned set of entries, optionally the default for a role."""

    id: UUID
    organization_id: UUID
    name: str
    created_at: datetime
    updated_at: datetime
    description: str | None = None
    is_default: bool = False
    default_for_role: UserRole | None = None
    permissions: list[PermissionEntry] = field(default_factory=list)

    @property
    def role_key(self) -> str:
        """Role this set is listed under in summaries."""
        return self.default_for_role.value if self.default_for_role else "custom"

    def is_default_for(self, role: UserRole) -> bool:
        return self.is_default and self.default_for_role == role

    def find_entry(self, resource: str, action: str) -> PermissionEntry | None:
        for entry in self.permissions:
            if entry.resource == resource and entry.action == action:
                return entry
        return None
