"""Permission summary DTOs - the three projections of an organization's sets."""

from dataclasses import dataclass, field
from uuid import UUID

from campdesk.domain.value_objects import format_role


@dataclass
class RoleRow:
    """One role's grant for an action. row_span is set on the first row only."""

    role: str
    allowed: bool
    scope: str
    row_span: int = 0


@dataclass
class ActionGroup:
    action: str
    rows: list[RoleRow] = field(default_factory=list)


@dataclass
class ResourceGroup:
    resource: str
    actions: list[ActionGroup] = field(default_factory=list)


@dataclass
class Grant:
    allowed: bool
    scope: str


@dataclass
class RoleGroup:
    """resources maps resource -> action -> grant."""

    role: str
    resources: dict[str, dict[str, Grant]] = field(default_factory=dict)


@dataclass
class GrantRow:
    resource: str
    action: str
    allowed: bool
    scope: str


@dataclass
class AssignedSet:
    id: UUID
    name: str
    permissions: list[GrantRow] = field(default_factory=list)


@dataclass
class UserGroup:
    """Team member with the permission sets explicitly assigned to them."""

    user_id: UUID
    username: str
    name: str
    email: str
    role: str
    permission_sets: list[AssignedSet] = field(default_factory=list)

    @property
    def uses_defaults(self) -> bool:
        return not self.permission_sets

    @property
    def description(self) -> str:
        if self.uses_defaults:
            return f"using default permissions for {format_role(self.role)}"
        count = len(self.permission_sets)
        return f"{count} assigned permission set{'s' if count != 1 else ''}"
