"""Pure domain services."""

from campdesk.domain.services.permission_resolver import (
    DENIED,
    EffectivePermission,
    assignment_order,
    resolve_permission,
    select_permission_sets,
)
from campdesk.domain.services.registration_window import compute_registration_status
from campdesk.domain.services.scope_policy import OwnershipRelation, ScopePolicy

__all__ = [
    "DENIED",
    "EffectivePermission",
    "OwnershipRelation",
    "ScopePolicy",
    "assignment_order",
    "compute_registration_status",
    "resolve_permission",
    "select_permission_sets",
]
