"""Resources, actions and scopes a permission entry can refer to."""

from enum import StrEnum


class PermissionResource(StrEnum):
    """Things a permission entry grants access to."""

    CAMPS = "camps"
    ATHLETES = "athletes"
    TEAM = "team"
    DOCUMENTS = "documents"
    SETTINGS = "settings"
    REPORTS = "reports"
    COMMUNICATIONS = "communications"
    REGISTRATIONS = "registrations"
    SESSIONS = "sessions"
    SCHEDULES = "schedules"
    CUSTOM_FIELDS = "custom_fields"
    PAYMENTS = "payments"


class PermissionAction(StrEnum):
    """Operations on a resource."""

    VIEW = "view"
    CREATE = "create"
    EDIT = "edit"
    DELETE = "delete"
    APPROVE = "approve"
    ASSIGN = "assign"
    MESSAGE = "message"


class PermissionScope(StrEnum):
    """Breadth of records a granted action applies to."""

    OWN = "own"
    ORGANIZATION = "organization"
    ALL = "all"


RESOURCE_LABELS: dict[str, str] = {
    PermissionResource.CAMPS: "Camps",
    PermissionResource.ATHLETES: "Athletes",
    PermissionResource.TEAM: "Team",
    PermissionResource.DOCUMENTS: "Documents",
    PermissionResource.SETTINGS: "Settings",
    PermissionResource.REPORTS: "Reports",
    PermissionResource.COMMUNICATIONS: "Communications",
    PermissionResource.REGISTRATIONS: "Registrations",
    PermissionResource.SESSIONS: "Sessions",
    PermissionResource.SCHEDULES: "Schedules",
    PermissionResource.CUSTOM_FIELDS: "Custom Fields",
    PermissionResource.PAYMENTS: "Payments",
}

ACTION_LABELS: dict[str, str] = {
    PermissionAction.VIEW: "View",
    PermissionAction.CREATE: "Create",
    PermissionAction.EDIT: "Edit",
    PermissionAction.DELETE: "Delete",
    PermissionAction.APPROVE: "Approve",
    PermissionAction.ASSIGN: "Assign",
    PermissionAction.MESSAGE: "Message",
}

SCOPE_LABELS: dict[str, str] = {
    PermissionScope.OWN: "Own",
    PermissionScope.ORGANIZATION: "Organization",
    PermissionScope.ALL: "All",
}


def resource_label(value: str) -> str:
    return RESOURCE_LABELS.get(value, value)


def action_label(value: str) -> str:
    return ACTION_LABELS.get(value, value)


def scope_label(value: str) -> str:
    return SCOPE_LABELS.get(value, value)
