"""Create permission set use case."""

import logging
from datetime import UTC, datetime
from uuid import UUID, uuid4

from campdesk.application.dto.permission_input import PermissionSetInput
from campdesk.application.use_cases.access import ensure_permission_admin, load_actor
from campdesk.application.use_cases.permission.validation import parse_default_role
from campdesk.domain.entities import PermissionSet

logger = logging.getLogger(__name__)


class CreatePermissionSetUseCase:
    """Create a permission set in an organization."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        actor_id: str,
        organization_id: UUID,
        data: PermissionSetInput,
    ) -> PermissionSet:
        """Create the set. A new default for a role replaces the previous default."""
        role = parse_default_role(data)

        async with self._uow_factory() as uow:
            actor = await load_actor(uow, actor_id)
            ensure_permission_admin(actor, organization_id)

            if data.is_default and role:
                for existing in await uow.permission_sets.list_by_organization(organization_id):
                    if existing.is_default_for(role):
                        existing.is_default = False
                        await uow.permission_sets.update(existing)

            now = datetime.now(UTC)
            permission_set = PermissionSet(
                id=uuid4(),
                organization_id=organization_id,
                name=data.name.strip(),
                description=data.description,
                is_default=data.is_default,
                default_for_role=role,
                created_at=now,
                updated_at=now,
            )
            await uow.permission_sets.create(permission_set)

        logger.info(
            "Permission set %s created in organization %s", permission_set.id, organization_id
        )
        return permission_set
