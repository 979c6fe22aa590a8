"""Registration repository port."""

from typing import Protocol
from uuid import UUID

from campdesk.domain.entities import Registration


class RegistrationRepository(Protocol):
    """Port for camp registrations."""

    async def list_by_camp(self, camp_id: UUID) -> list[Registration]: ...

    async def list_by_parent(self, parent_id: UUID) -> list[Registration]: ...

    async def list_by_child(self, child_id: UUID) -> list[Registration]: ...

    async def count_active(self, camp_id: UUID) -> int: ...

    async def create(self, registration: Registration) -> Registration: ...
