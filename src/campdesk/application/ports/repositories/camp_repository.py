"""Camp repository port."""

from typing import Protocol
from uuid import UUID

from campdesk.domain.entities import Camp


class CampRepository(Protocol):
    """Port for camp persistence."""

    async def get_by_id(self, camp_id: UUID) -> Camp | None: ...

    async def get_for_update(self, camp_id: UUID) -> Camp | None: ...

    async def list_by_organization(self, organization_id: UUID) -> list[Camp]: ...
