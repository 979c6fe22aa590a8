"""List user permissions use case."""

from uuid import UUID

from campdesk.application.use_cases.access import ensure_permission_admin, load_actor
from campdesk.domain.entities import PermissionSet, UserPermission
from campdesk.domain.exceptions import NotFound


class ListUserPermissionsUseCase:
    """List a user's explicit assignments together with the assigned sets."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self, actor_id: str, user_id: UUID
    ) -> list[tuple[UserPermission, PermissionSet | None]]:
        """Users may list their own assignments; camp creators any member's."""
        async with self._uow_factory() as uow:
            actor = await load_actor(uow, actor_id)
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", str(user_id))
            if actor.id != user.id:
                ensure_permission_admin(actor, user.organization_id)

            items = []
            for up in await uow.user_permissions.list_by_user(user_id):
                items.append((up, await uow.permission_sets.get_by_id(up.permission_set_id)))
            return items
