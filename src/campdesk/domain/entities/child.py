"""Child entity."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID


@dataclass
class Child:
    """Athlete profile owned by a parent account."""

    id: UUID
    parent_id: UUID
    full_name: str
    date_of_birth: date | None = None
