"""Permission checker port - resolves grants for a user."""

from typing import Protocol

from campdesk.domain.entities import User
from campdesk.domain.services import EffectivePermission


class PermissionChecker(Protocol):
    """Port for resolving a user's effective permission."""

    async def resolve(self, user: User, resource: str, action: str) -> EffectivePermission: ...

    async def check(self, user: User, resource: str, action: str) -> bool: ...
