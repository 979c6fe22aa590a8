"""User entity."""

from dataclasses import dataclass
from uuid import UUID

from campdesk.domain.value_objects import UserRole


@dataclass
class User:
    """Team member or parent account."""

    id: UUID
    username: str
    email: str
    role: UserRole
    organization_id: UUID | None = None
    subject: str | None = None
    first_name: str | None = None
    last_name: str | None = None

    @property
    def display_name(self) -> str:
        name = " ".join(p for p in (self.first_name, self.last_name) if p)
        return name or self.username
