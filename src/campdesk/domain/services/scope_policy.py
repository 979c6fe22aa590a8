"""Scope policy - which records a granted permission covers."""

from dataclasses import dataclass, field
from enum import StrEnum
from uuid import UUID

from campdesk.domain.entities import User
from campdesk.domain.services.permission_resolver import EffectivePermission
from campdesk.domain.value_objects import PermissionResource, PermissionScope


class OwnershipRelation(StrEnum):
    """Record attribute that identifies the owner for `own` scope."""

    CREATOR = "created_by"
    PARENT = "parent_id"


DEFAULT_OWNERSHIP: dict[str, OwnershipRelation] = {
    PermissionResource.REGISTRATIONS: OwnershipRelation.PARENT,
    PermissionResource.ATHLETES: OwnershipRelation.PARENT,
    PermissionResource.PAYMENTS: OwnershipRelation.PARENT,
}


@dataclass
class ScopePolicy:
    """Per-resource meaning of `own`; resources not listed use the creator."""

    ownership: dict[str, OwnershipRelation] = field(
        default_factory=lambda: dict(DEFAULT_OWNERSHIP)
    )

    def relation_for(self, resource: str) -> OwnershipRelation:
        return self.ownership.get(resource, OwnershipRelation.CREATOR)

    def owner_of(self, resource: str, record: object) -> UUID | None:
        return getattr(record, self.relation_for(resource).value, None)

    def in_scope(
        self,
        effective: EffectivePermission,
        user: User,
        resource: str,
        record: object,
        record_organization_id: UUID | None,
    ) -> bool:
        """Check a single record against a resolved permission."""
        if not effective.allowed:
            return False
        if effective.scope == PermissionScope.ALL:
            return True
        if effective.scope == PermissionScope.ORGANIZATION:
            return (
                user.organization_id is not None
                and user.organization_id == record_organization_id
            )
        if effective.scope == PermissionScope.OWN:
            return self.owner_of(resource, record) == user.id
        return False
