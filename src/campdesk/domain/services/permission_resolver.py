"""Effective permission resolution.

A user's explicit permission set assignments take precedence over the default
set of their role. Within the chosen sets the first entry matching
(resource, action) decides; no entry means denied.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from campdesk.domain.entities import PermissionSet, User, UserPermission
from campdesk.domain.value_objects import UserRole


@dataclass(frozen=True)
class EffectivePermission:
    """Outcome of resolving (user, resource, action)."""

    allowed: bool
    scope: str | None = None
    permission_set_id: UUID | None = None


DENIED = EffectivePermission(allowed=False)


def assignment_order(assignment: UserPermission) -> tuple[bool, datetime]:
    """Sort key: oldest assignment first, undated ones last."""
    created_at = assignment.created_at
    if created_at is None:
        return (True, datetime.min.replace(tzinfo=UTC))
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=UTC)
    return (False, created_at)


def select_permission_sets(
    user: User,
    permission_sets: Iterable[PermissionSet],
    assignments: Iterable[UserPermission],
) -> list[PermissionSet]:
    """Return the sets that govern the user, in precedence order.

    permission_sets are the sets of the user's organization.
    """
    sets = list(permission_sets)
    by_id = {s.id: s for s in sets}
    assigned = sorted(
        (a for a in assignments if a.user_id == user.id),
        key=assignment_order,
    )
    if assigned:
        return [by_id[a.permission_set_id] for a in assigned if a.permission_set_id in by_id]

    if user.role == UserRole.UNKNOWN:
        return []
    for permission_set in sets:
        if permission_set.is_default_for(user.role):
            return [permission_set]
    return []


def resolve_permission(
    user: User,
    resource: str,
    action: str,
    permission_sets: Iterable[PermissionSet],
    assignments: Iterable[UserPermission],
) -> EffectivePermission:
    """Resolve whether user may perform action on resource, and at what scope."""
    for permission_set in select_permission_sets(user, permission_sets, assignments):
        entry = permission_set.find_entry(str(resource), str(action))
        if entry is not None:
            return EffectivePermission(
                allowed=entry.allowed,
                scope=entry.scope,
                permission_set_id=permission_set.id,
            )
    return DENIED
