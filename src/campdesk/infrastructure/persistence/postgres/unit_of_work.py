"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg_pool import AsyncConnectionPool

from campdesk.infrastructure.persistence.postgres.camp_repository import (
    PostgresCampRepository,
)
from campdesk.infrastructure.persistence.postgres.child_repository import (
    PostgresChildRepository,
)
from campdesk.infrastructure.persistence.postgres.permission_set_repository import (
    PostgresPermissionSetRepository,
)
from campdesk.infrastructure.persistence.postgres.registration_repository import (
    PostgresRegistrationRepository,
)
from campdesk.infrastructure.persistence.postgres.user_permission_repository import (
    PostgresUserPermissionRepository,
)
from campdesk.infrastructure.persistence.postgres.user_repository import (
    PostgresUserRepository,
)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._permission_sets = PostgresPermissionSetRepository(self._conn)
        self._user_permissions = PostgresUserPermissionRepository(self._conn)
        self._users = PostgresUserRepository(self._conn)
        self._camps = PostgresCampRepository(self._conn)
        self._registrations = PostgresRegistrationRepository(self._conn)
        self._children = PostgresChildRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def permission_sets(self) -> PostgresPermissionSetRepository:
        return self._permission_sets

    @property
    def user_permissions(self) -> PostgresUserPermissionRepository:
        return self._user_permissions

    @property
    def users(self) -> PostgresUserRepository:
        return self._users

    @property
    def camps(self) -> PostgresCampRepository:
        return self._camps

    @property
    def registrations(self) -> PostgresRegistrationRepository:
        return self._registrations

    @property
    def children(self) -> PostgresChildRepository:
        return self._children

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager)."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        uow = PostgresUnitOfWork(pool)
        async with uow:
            try:
                yield uow
                await uow.commit()
            except BaseException:
                await uow.rollback()
                raise

    return factory
