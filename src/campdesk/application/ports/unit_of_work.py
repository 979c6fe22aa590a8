"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from campdesk.application.ports.repositories import (
    CampRepository,
    ChildRepository,
    PermissionSetRepository,
    RegistrationRepository,
    UserPermissionRepository,
    UserRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def permission_sets(self) -> PermissionSetRepository: ...

    @property
    def user_permissions(self) -> UserPermissionRepository: ...

    @property
    def users(self) -> UserRepository: ...

    @property
    def camps(self) -> CampRepository: ...

    @property
    def registrations(self) -> RegistrationRepository: ...

    @property
    def children(self) -> ChildRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
