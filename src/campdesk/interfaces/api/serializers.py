"""JSON shapes for API responses (camelCase, as the web client expects)."""

from datetime import datetime

from campdesk.application.dto.camp_dto import CampOutput
from campdesk.application.dto.dashboard import CampSummary, Dashboard
from campdesk.application.dto.permission_summary import (
    AssignedSet,
    ResourceGroup,
    RoleGroup,
    UserGroup,
)
from campdesk.domain.entities import (
    Camp,
    PermissionEntry,
    PermissionSet,
    Registration,
    User,
    UserPermission,
)
from campdesk.domain.value_objects import action_label, format_role, resource_label


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def entry_to_json(entry: PermissionEntry) -> dict:
    return {
        "id": str(entry.id),
        "permissionSetId": str(entry.permission_set_id),
        "resource": entry.resource,
        "action": entry.action,
        "allowed": entry.allowed,
        "scope": entry.scope,
    }


def permission_set_to_json(permission_set: PermissionSet) -> dict:
    return {
        "id": str(permission_set.id),
        "organizationId": str(permission_set.organization_id),
        "name": permission_set.name,
        "description": permission_set.description,
        "isDefault": permission_set.is_default,
        "defaultForRole": (
            permission_set.default_for_role.value if permission_set.default_for_role else None
        ),
        "createdAt": _iso(permission_set.created_at),
        "updatedAt": _iso(permission_set.updated_at),
        "permissions": [entry_to_json(e) for e in permission_set.permissions],
    }


def user_permission_to_json(
    user_permission: UserPermission, permission_set: PermissionSet | None = None
) -> dict:
    data = {
        "id": str(user_permission.id),
        "userId": str(user_permission.user_id),
        "permissionSetId": str(user_permission.permission_set_id),
        "createdAt": _iso(user_permission.created_at),
        "updatedAt": _iso(user_permission.updated_at),
    }
    if permission_set is not None:
        data["permissionSet"] = permission_set_to_json(permission_set)
    return data


def member_to_json(user: User) -> dict:
    return {
        "id": str(user.id),
        "username": user.username,
        "email": user.email,
        "firstName": user.first_name,
        "lastName": user.last_name,
        "role": user.role.value,
    }


def _assigned_set_to_json(assigned: AssignedSet) -> dict:
    return {
        "id": str(assigned.id),
        "name": assigned.name,
        "permissions": [
            {
                "resource": p.resource,
                "action": p.action,
                "allowed": p.allowed,
                "scope": p.scope,
            }
            for p in assigned.permissions
        ],
    }


def user_group_to_json(group: UserGroup, with_description: bool = False) -> dict:
    data = {
        "userId": str(group.user_id),
        "username": group.username,
        "name": group.name,
        "email": group.email,
        "role": group.role,
        "permissionSets": [_assigned_set_to_json(s) for s in group.permission_sets],
    }
    if with_description:
        data["usesDefaults"] = group.uses_defaults
        data["description"] = group.description
    return data


def resource_group_to_json(group: ResourceGroup) -> dict:
    return {
        "resource": group.resource,
        "label": resource_label(group.resource),
        "permissions": [
            {
                "action": a.action,
                "label": action_label(a.action),
                "roles": [
                    {
                        "role": r.role,
                        "label": format_role(r.role),
                        "allowed": r.allowed,
                        "scope": r.scope,
                        "rowSpan": r.row_span,
                    }
                    for r in a.rows
                ],
            }
            for a in group.actions
        ],
    }


def role_group_to_json(group: RoleGroup) -> dict:
    return {
        "role": group.role,
        "label": format_role(group.role),
        "resources": {
            resource: {
                "actions": {
                    action: {"allowed": grant.allowed, "scope": grant.scope}
                    for action, grant in actions.items()
                }
            }
            for resource, actions in group.resources.items()
        },
    }


def camp_to_json(camp: Camp) -> dict:
    return {
        "id": str(camp.id),
        "organizationId": str(camp.organization_id),
        "name": camp.name,
        "slug": camp.slug,
        "startDate": _iso(camp.start_date),
        "endDate": _iso(camp.end_date),
        "registrationStartDate": _iso(camp.registration_start_date),
        "registrationEndDate": _iso(camp.registration_end_date),
        "capacity": camp.capacity,
        "waitlistEnabled": camp.waitlist_enabled,
        "isCancelled": camp.is_cancelled,
    }


def camp_output_to_json(output: CampOutput) -> dict:
    data = camp_to_json(output.camp)
    data["registrationCount"] = output.registration_count
    data["registrationStatus"] = output.registration_status.value
    data["permissions"] = {"canManage": output.can_manage}
    return data


def registration_to_json(registration: Registration) -> dict:
    return {
        "id": str(registration.id),
        "campId": str(registration.camp_id),
        "childId": str(registration.child_id),
        "parentId": str(registration.parent_id),
        "registeredAt": _iso(registration.registered_at),
        "paid": registration.paid,
        "waitlisted": registration.waitlisted,
    }


def _camp_summary_to_json(summary: CampSummary) -> dict:
    data = camp_to_json(summary.camp)
    data["registrationCount"] = summary.registration_count
    data["registrationStatus"] = summary.status.value
    return data


def dashboard_to_json(dashboard: Dashboard) -> dict:
    return {
        "kind": dashboard.kind,
        "role": dashboard.role,
        "camps": [_camp_summary_to_json(c) for c in dashboard.camps],
        "registrations": [registration_to_json(r) for r in dashboard.registrations],
        "message": dashboard.message,
    }
