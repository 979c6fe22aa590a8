"""Permission summary, by-user view, export and team API resources."""

import falcon
import falcon.asgi

from campdesk.application.services.permission_export import (
    CSV_CONTENT_TYPE,
    CSV_FILENAME,
)
from campdesk.application.use_cases.permission.export_permissions import (
    ExportPermissionsUseCase,
)
from campdesk.application.use_cases.permission.summarize_permissions import (
    SummarizePermissionsUseCase,
    SummaryView,
)
from campdesk.application.use_cases.team.list_team_members import ListTeamMembersUseCase
from campdesk.domain.exceptions import CampDeskError
from campdesk.interfaces.api.resources.common import current_user, parse_uuid, set_error
from campdesk.interfaces.api.serializers import (
    member_to_json,
    resource_group_to_json,
    role_group_to_json,
    user_group_to_json,
)


class PermissionSummaryResource:
    """GET /api/organizations/{id}/permissions/summary?view=resource|role|user."""

    def __init__(self, summarize_permissions: SummarizePermissionsUseCase) -> None:
        self._summarize = summarize_permissions

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, organization_id: str
    ) -> None:
        user = current_user(req, resp)
        if not user:
            return
        view = req.get_param("view") or SummaryView.RESOURCE.value
        try:
            org_id = parse_uuid(organization_id, "organization")
            groups = await self._summarize.execute(user.user_id, org_id, view)
        except CampDeskError as e:
            set_error(resp, e)
            return

        if view == SummaryView.ROLE:
            items = [role_group_to_json(g) for g in groups]
        elif view == SummaryView.USER:
            items = [user_group_to_json(g, with_description=True) for g in groups]
        else:
            items = [resource_group_to_json(g) for g in groups]
        resp.media = {"view": view, "items": items}
        resp.status = falcon.HTTP_200


class OrganizationUserPermissionsResource:
    """GET /api/organizations/{id}/permissions/users - pre-joined by-user view."""

    def __init__(self, summarize_permissions: SummarizePermissionsUseCase) -> None:
        self._summarize = summarize_permissions

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, organization_id: str
    ) -> None:
        user = current_user(req, resp)
        if not user:
            return
        try:
            groups = await self._summarize.by_user(
                user.user_id, parse_uuid(organization_id, "organization")
            )
        except CampDeskError as e:
            set_error(resp, e)
            return
        resp.media = [user_group_to_json(g) for g in groups]
        resp.status = falcon.HTTP_200


class PermissionExportResource:
    """GET /api/organizations/{id}/permissions/export - CSV download."""

    def __init__(self, export_permissions: ExportPermissionsUseCase) -> None:
        self._export = export_permissions

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, organization_id: str
    ) -> None:
        user = current_user(req, resp)
        if not user:
            return
        try:
            text = await self._export.execute(
                user.user_id, parse_uuid(organization_id, "organization")
            )
        except CampDeskError as e:
            set_error(resp, e)
            return
        resp.content_type = CSV_CONTENT_TYPE
        resp.downloadable_as = CSV_FILENAME
        resp.text = text
        resp.status = falcon.HTTP_200


class TeamResource:
    """GET /api/organizations/{id}/team - organization members."""

    def __init__(self, list_team_members: ListTeamMembersUseCase) -> None:
        self._list = list_team_members

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, organization_id: str
    ) -> None:
        user = current_user(req, resp)
        if not user:
            return
        try:
            members = await self._list.execute(
                user.user_id, parse_uuid(organization_id, "organization")
            )
        except CampDeskError as e:
            set_error(resp, e)
            return
        resp.media = [member_to_json(m) for m in members]
        resp.status = falcon.HTTP_200
