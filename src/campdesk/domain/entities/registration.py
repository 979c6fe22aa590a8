"""Registration entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Registration:
    """A child registered for a camp by a parent."""

    id: UUID
    camp_id: UUID
    child_id: UUID
    parent_id: UUID
    registered_at: datetime
    paid: bool = False
    waitlisted: bool = False
