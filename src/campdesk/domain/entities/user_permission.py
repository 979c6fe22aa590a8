"""User permission entity - explicit set assignment."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class UserPermission:
    """Assigns a permission set to a user, overriding the role default."""

    id: UUID
    user_id: UUID
    permission_set_id: UUID
    created_at: datetime | None
    updated_at: datetime | None
