"""Check permission use case."""

from campdesk.application.ports import PermissionChecker
from campdesk.application.use_cases.access import load_actor
from campdesk.domain.services import EffectivePermission


class CheckPermissionUseCase:
    """Resolve the caller's effective permission for (resource, action)."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(self, actor_id: str, resource: str, action: str) -> EffectivePermission:
        async with self._uow_factory() as uow:
            actor = await load_actor(uow, actor_id)
        return await self._permission_checker.resolve(actor, resource, action)
