"""Export permissions use case."""

from uuid import UUID

from campdesk.application.services.permission_export import export_permissions_csv
from campdesk.application.use_cases.access import ensure_member, load_actor


class ExportPermissionsUseCase:
    """Render the by-resource summary as CSV text."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, actor_id: str, organization_id: UUID) -> str:
        async with self._uow_factory() as uow:
            actor = await load_actor(uow, actor_id)
            ensure_member(actor, organization_id)
            sets = await uow.permission_sets.list_by_organization(organization_id)
        return export_permissions_csv(sets)
