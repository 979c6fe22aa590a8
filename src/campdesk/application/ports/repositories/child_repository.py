"""Child repository port."""

from typing import Protocol
from uuid import UUID

from campdesk.domain.entities import Child


class ChildRepository(Protocol):
    """Port for children of parent accounts."""

    async def get_by_id(self, child_id: UUID) -> Child | None: ...
