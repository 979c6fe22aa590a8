"""Projections of permission sets by resource, by role and by user.

Each function rebuilds its output from the input; nothing is cached between
calls. Resources, actions and roles appear in order of first occurrence.
"""

from collections.abc import Iterable

from campdesk.application.dto.permission_summary import (
    ActionGroup,
    AssignedSet,
    Grant,
    GrantRow,
    ResourceGroup,
    RoleGroup,
    RoleRow,
    UserGroup,
)
from campdesk.domain.entities import PermissionSet, User, UserPermission
from campdesk.domain.services import assignment_order


def group_by_resource(permission_sets: Iterable[PermissionSet]) -> list[ResourceGroup]:
    """Resource -> action -> one row per role holding an entry for it."""
    resources: dict[str, ResourceGroup] = {}
    actions: dict[tuple[str, str], ActionGroup] = {}

    for permission_set in permission_sets:
        role = permission_set.role_key
        for entry in permission_set.permissions:
            group = resources.get(entry.resource)
            if group is None:
                group = resources[entry.resource] = ResourceGroup(resource=entry.resource)
            key = (entry.resource, entry.action)
            action_group = actions.get(key)
            if action_group is None:
                action_group = actions[key] = ActionGroup(action=entry.action)
                group.actions.append(action_group)
            action_group.rows.append(
                RoleRow(role=role, allowed=entry.allowed, scope=entry.scope)
            )

    for action_group in actions.values():
        action_group.rows[0].row_span = len(action_group.rows)
    return list(resources.values())


def group_by_role(permission_sets: Iterable[PermissionSet]) -> list[RoleGroup]:
    """Role -> resource -> action -> grant."""
    roles: dict[str, RoleGroup] = {}
    for permission_set in permission_sets:
        role = permission_set.role_key
        group = roles.setdefault(role, RoleGroup(role=role))
        for entry in permission_set.permissions:
            group.resources.setdefault(entry.resource, {})[entry.action] = Grant(
                allowed=entry.allowed, scope=entry.scope
            )
    return list(roles.values())


def _assigned_set(permission_set: PermissionSet) -> AssignedSet:
    return AssignedSet(
        id=permission_set.id,
        name=permission_set.name,
        permissions=[
            GrantRow(
                resource=e.resource,
                action=e.action,
                allowed=e.allowed,
                scope=e.scope,
            )
            for e in permission_set.permissions
        ],
    )


def group_by_user(
    members: Iterable[User],
    permission_sets: Iterable[PermissionSet],
    assignments: Iterable[UserPermission],
) -> list[UserGroup]:
    """One group per member; members without assignments use their role defaults."""
    by_id = {s.id: s for s in permission_sets}
    by_user: dict = {}
    for assignment in sorted(assignments, key=assignment_order):
        by_user.setdefault(assignment.user_id, []).append(assignment)

    groups = []
    for member in members:
        sets = [
            _assigned_set(by_id[a.permission_set_id])
            for a in by_user.get(member.id, [])
            if a.permission_set_id in by_id
        ]
        groups.append(
            UserGroup(
                user_id=member.id,
                username=member.username,
                name=member.display_name,
                email=member.email,
                role=member.role.value,
                permission_sets=sets,
            )
        )
    return groups
