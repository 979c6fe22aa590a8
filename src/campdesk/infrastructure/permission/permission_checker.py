"""Permission checker implementation - resolves against stored permission sets."""

import logging

from campdesk.domain.entities import User
from campdesk.domain.services import DENIED, EffectivePermission, resolve_permission

logger = logging.getLogger(__name__)


class CampDeskPermissionChecker:
    """Resolves grants from the user's assignments or their role's default set."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def resolve(self, user: User, resource: str, action: str) -> EffectivePermission:
        """Effective permission for user; users outside an organization get nothing."""
        if user.organization_id is None:
            return DENIED
        async with self._uow_factory() as uow:
            sets = await uow.permission_sets.list_by_organization(user.organization_id)
            assignments = await uow.user_permissions.list_by_user(user.id)

        effective = resolve_permission(user, resource, action, sets, assignments)
        logger.debug(
            "Resolved %s:%s for user %s -> allowed=%s scope=%s",
            resource,
            action,
            user.id,
            effective.allowed,
            effective.scope,
        )
        return effective

    async def check(self, user: User, resource: str, action: str) -> bool:
        """Check if user may perform action on resource at any scope."""
        return (await self.resolve(user, resource, action)).allowed
