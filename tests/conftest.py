"""Pytest fixtures for CampDesk tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from campdesk.domain.entities import (
    Camp,
    Child,
    PermissionEntry,
    PermissionSet,
    Registration,
    User,
    UserPermission,
)
from campdesk.domain.services import EffectivePermission
from campdesk.domain.value_objects import UserRole


# --- Fake repositories ---


class FakePermissionSetRepository:
    """In-memory permission set repository. Entries live on their set."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, PermissionSet] = {}

    async def get_by_id(self, permission_set_id: UUID) -> PermissionSet | None:
        return self._by_id.get(permission_set_id)

    async def list_by_organization(self, organization_id: UUID) -> list[PermissionSet]:
        return [s for s in self._by_id.values() if s.organization_id == organization_id]

    async def create(self, permission_set: PermissionSet) -> PermissionSet:
        self._by_id[permission_set.id] = permission_set
        return permission_set

    async def update(self, permission_set: PermissionSet) -> None:
        self._by_id[permission_set.id] = permission_set

    async def delete(self, permission_set_id: UUID) -> None:
        self._by_id.pop(permission_set_id, None)

    async def get_entry(self, entry_id: UUID) -> PermissionEntry | None:
        for s in self._by_id.values():
            for e in s.permissions:
                if e.id == entry_id:
                    return e
        return None

    async def add_entry(self, entry: PermissionEntry) -> PermissionEntry:
        self._by_id[entry.permission_set_id].permissions.append(entry)
        return entry

    async def update_entry(self, entry: PermissionEntry) -> None:
        entries = self._by_id[entry.permission_set_id].permissions
        for i, e in enumerate(entries):
            if e.id == entry.id:
                entries[i] = entry

    async def delete_entry(self, entry_id: UUID) -> None:
        for s in self._by_id.values():
            s.permissions = [e for e in s.permissions if e.id != entry_id]

    def add_set(self, permission_set: PermissionSet) -> None:
        """Helper to add set for tests."""
        self._by_id[permission_set.id] = permission_set


class FakeUserRepository:
    """In-memory user repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, User] = {}

    async def get_by_id(self, user_id: UUID) -> User | None:
        return self._by_id.get(user_id)

    async def get_by_subject(self, subject: str) -> User | None:
        for u in self._by_id.values():
            if u.subject == subject:
                return u
        return None

    async def list_by_organization(self, organization_id: UUID) -> list[User]:
        return sorted(
            (u for u in self._by_id.values() if u.organization_id == organization_id),
            key=lambda u: u.username,
        )

    def add_user(self, user: User) -> None:
        """Helper to add user for tests."""
        self._by_id[user.id] = user


class FakeUserPermissionRepository:
    """In-memory user permission repository."""

    def __init__(self, users: FakeUserRepository) -> None:
        self._by_id: dict[UUID, UserPermission] = {}
        self._users = users

    async def get_by_id(self, user_permission_id: UUID) -> UserPermission | None:
        return self._by_id.get(user_permission_id)

    async def list_by_user(self, user_id: UUID) -> list[UserPermission]:
        return sorted(
            (p for p in self._by_id.values() if p.user_id == user_id),
            key=lambda p: p.created_at,
        )

    async def list_by_organization(self, organization_id: UUID) -> list[UserPermission]:
        members = {u.id for u in await self._users.list_by_organization(organization_id)}
        return sorted(
            (p for p in self._by_id.values() if p.user_id in members),
            key=lambda p: p.created_at,
        )

    async def create(self, user_permission: UserPermission) -> UserPermission:
        self._by_id[user_permission.id] = user_permission
        return user_permission

    async def delete(self, user_permission_id: UUID) -> None:
        self._by_id.pop(user_permission_id, None)


class FakeCampRepository:
    """In-memory camp repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Camp] = {}
        self.locked: list[UUID] = []

    async def get_by_id(self, camp_id: UUID) -> Camp | None:
        return self._by_id.get(camp_id)

    async def get_for_update(self, camp_id: UUID) -> Camp | None:
        self.locked.append(camp_id)
        return self._by_id.get(camp_id)

    async def list_by_organization(self, organization_id: UUID) -> list[Camp]:
        return [c for c in self._by_id.values() if c.organization_id == organization_id]

    def add_camp(self, camp: Camp) -> None:
        """Helper to add camp for tests."""
        self._by_id[camp.id] = camp


class FakeRegistrationRepository:
    """In-memory registration repository."""

    def __init__(self) -> None:
        self._store: list[Registration] = []

    async def list_by_camp(self, camp_id: UUID) -> list[Registration]:
        return [r for r in self._store if r.camp_id == camp_id]

    async def list_by_parent(self, parent_id: UUID) -> list[Registration]:
        return [r for r in self._store if r.parent_id == parent_id]

    async def list_by_child(self, child_id: UUID) -> list[Registration]:
        return [r for r in self._store if r.child_id == child_id]

    async def count_active(self, camp_id: UUID) -> int:
        return sum(1 for r in self._store if r.camp_id == camp_id and not r.waitlisted)

    async def create(self, registration: Registration) -> Registration:
        self._store.append(registration)
        return registration


class FakeChildRepository:
    """In-memory child repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Child] = {}

    async def get_by_id(self, child_id: UUID) -> Child | None:
        return self._by_id.get(child_id)

    def add_child(self, child: Child) -> None:
        """Helper to add child for tests."""
        self._by_id[child.id] = child


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.permission_sets = FakePermissionSetRepository()
        self.users = FakeUserRepository()
        self.user_permissions = FakeUserPermissionRepository(self.users)
        self.camps = FakeCampRepository()
        self.registrations = FakeRegistrationRepository()
        self.children = FakeChildRepository()

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


@asynccontextmanager
async def fake_uow_factory() -> AsyncIterator[FakeUnitOfWork]:
    """Factory that yields a fresh FakeUnitOfWork per call."""
    uow = FakeUnitOfWork()
    yield uow


# --- Builders ---

NOW = datetime(2026, 6, 1, 12, 0, tzinfo=UTC)


def make_user(
    role: UserRole = UserRole.COACH,
    organization_id: UUID | None = None,
    username: str | None = None,
    **kwargs,
) -> User:
    user_id = kwargs.pop("id", None) or uuid4()
    username = username or f"{role.value}-{str(user_id)[:8]}"
    return User(
        id=user_id,
        username=username,
        email=f"{username}@example.com",
        role=role,
        organization_id=organization_id,
        subject=kwargs.pop("subject", f"sub-{username}"),
        **kwargs,
    )


def make_set(
    organization_id: UUID,
    name: str,
    entries: list[tuple[str, str, bool, str]] | None = None,
    default_for_role: UserRole | None = None,
    created_at: datetime = NOW,
) -> PermissionSet:
    """entries are (resource, action, allowed, scope) tuples."""
    set_id = uuid4()
    return PermissionSet(
        id=set_id,
        organization_id=organization_id,
        name=name,
        created_at=created_at,
        updated_at=created_at,
        is_default=default_for_role is not None,
        default_for_role=default_for_role,
        permissions=[
            PermissionEntry(
                id=uuid4(),
                permission_set_id=set_id,
                resource=resource,
                action=action,
                allowed=allowed,
                scope=scope,
            )
            for resource, action, allowed, scope in entries or []
        ],
    )


def make_assignment(user: User, permission_set: PermissionSet, created_at: datetime | None = NOW) -> UserPermission:
    return UserPermission(
        id=uuid4(),
        user_id=user.id,
        permission_set_id=permission_set.id,
        created_at=created_at,
        updated_at=created_at,
    )


def make_camp(organization_id: UUID, capacity: int = 10, waitlist_enabled: bool = False, **kwargs) -> Camp:
    """Camp whose registration window is open at NOW."""
    defaults = dict(
        registration_start_date=NOW - timedelta(days=10),
        registration_end_date=NOW + timedelta(days=10),
        start_date=NOW + timedelta(days=20),
        end_date=NOW + timedelta(days=25),
    )
    defaults.update(kwargs)
    return Camp(
        id=defaults.pop("id", None) or uuid4(),
        organization_id=organization_id,
        name=defaults.pop("name", "Summer Skills Camp"),
        capacity=capacity,
        waitlist_enabled=waitlist_enabled,
        **defaults,
    )


def make_child(parent: User, full_name: str = "Sam Rivera") -> Child:
    return Child(id=uuid4(), parent_id=parent.id, full_name=full_name)


def make_registration(camp: Camp, parent: User, waitlisted: bool = False) -> Registration:
    return Registration(
        id=uuid4(),
        camp_id=camp.id,
        child_id=uuid4(),
        parent_id=parent.id,
        registered_at=NOW,
        waitlisted=waitlisted,
    )


# --- Fixtures ---


@pytest.fixture
def organization_id() -> UUID:
    return uuid4()


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow):
    """Factory returning async context manager that yields fake_uow."""

    @asynccontextmanager
    async def _factory():
        yield fake_uow

    return _factory


@pytest.fixture
def mock_permission_checker():
    """AsyncMock for PermissionChecker - allows at organization scope by default."""
    from unittest.mock import AsyncMock

    mock = AsyncMock()
    mock.check.return_value = True
    mock.resolve.return_value = EffectivePermission(allowed=True, scope="organization")
    return mock
