"""Camp entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Camp:
    """Camp with capacity and registration window."""

    id: UUID
    organization_id: UUID
    name: str
    start_date: datetime | None
    end_date: datetime | None
    registration_start_date: datetime | None
    registration_end_date: datetime | None
    capacity: int
    waitlist_enabled: bool = True
    slug: str | None = None
    created_by: UUID | None = None
    is_deleted: bool = False
    is_cancelled: bool = False
