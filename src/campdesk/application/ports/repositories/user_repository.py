"""User repository port."""

from typing import Protocol
from uuid import UUID

from campdesk.domain.entities import User


class UserRepository(Protocol):
    """Port for user lookup."""

    async def get_by_id(self, user_id: UUID) -> User | None: ...

    async def get_by_subject(self, subject: str) -> User | None: ...

    async def list_by_organization(self, organization_id: UUID) -> list[User]: ...
