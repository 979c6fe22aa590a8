"""Assign permission set use case."""

import logging
from datetime import UTC, datetime
from uuid import UUID, uuid4

from campdesk.application.use_cases.access import ensure_permission_admin, load_actor
from campdesk.domain.entities import UserPermission
from campdesk.domain.exceptions import DuplicateAssignment, NotFound, ValidationError

logger = logging.getLogger(__name__)


class AssignPermissionSetUseCase:
    """Assign a permission set to a user, overriding their role default."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        actor_id: str,
        user_id: UUID,
        permission_set_id: UUID,
    ) -> UserPermission:
        """Actor must be a camp creator in the organization of both user and set."""
        async with self._uow_factory() as uow:
            actor = await load_actor(uow, actor_id)
            permission_set = await uow.permission_sets.get_by_id(permission_set_id)
            if not permission_set:
                raise NotFound("PermissionSet", str(permission_set_id))
            ensure_permission_admin(actor, permission_set.organization_id)

            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", str(user_id))
            if user.organization_id != permission_set.organization_id:
                raise ValidationError("User and permission set belong to different organizations")

            for existing in await uow.user_permissions.list_by_user(user_id):
                if existing.permission_set_id == permission_set_id:
                    raise DuplicateAssignment("Permission set is already assigned to user")

            now = datetime.now(UTC)
            user_permission = UserPermission(
                id=uuid4(),
                user_id=user_id,
                permission_set_id=permission_set_id,
                created_at=now,
                updated_at=now,
            )
            await uow.user_permissions.create(user_permission)

        logger.info("Permission set %s assigned to user %s", permission_set_id, user_id)
        return user_permission
