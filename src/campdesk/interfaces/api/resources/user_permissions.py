"""User permission assignment and check API resources."""

import falcon
import falcon.asgi

from campdesk.application.use_cases.permission.assign_permission_set import (
    AssignPermissionSetUseCase,
)
from campdesk.application.use_cases.permission.check_permission import CheckPermissionUseCase
from campdesk.application.use_cases.permission.list_user_permissions import (
    ListUserPermissionsUseCase,
)
from campdesk.application.use_cases.permission.revoke_permission_set import (
    RevokePermissionSetUseCase,
)
from campdesk.domain.exceptions import CampDeskError, ValidationError
from campdesk.interfaces.api.resources.common import (
    current_user,
    parse_uuid,
    read_body,
    set_error,
)
from campdesk.interfaces.api.serializers import user_permission_to_json


class UserPermissionsResource:
    """GET/POST /api/users/{id}/permissions - list and assign permission sets."""

    def __init__(
        self,
        list_user_permissions: ListUserPermissionsUseCase,
        assign_permission_set: AssignPermissionSetUseCase,
    ) -> None:
        self._list = list_user_permissions
        self._assign = assign_permission_set

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        """List the user's assignments with the assigned sets."""
        user = current_user(req, resp)
        if not user:
            return
        try:
            items = await self._list.execute(user.user_id, parse_uuid(user_id, "user"))
        except CampDeskError as e:
            set_error(resp, e)
            return
        resp.media = [user_permission_to_json(up, ps) for up, ps in items]
        resp.status = falcon.HTTP_200

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        """Assign permission set to user."""
        user = current_user(req, resp)
        if not user:
            return
        try:
            target_id = parse_uuid(user_id, "user")
            body = await read_body(req)
            if "permissionSetId" not in body:
                raise ValidationError("Missing required field: 'permissionSetId'")
            set_id = parse_uuid(str(body["permissionSetId"]), "permission set")
            user_permission = await self._assign.execute(user.user_id, target_id, set_id)
        except CampDeskError as e:
            set_error(resp, e)
            return
        resp.media = user_permission_to_json(user_permission)
        resp.status = falcon.HTTP_201


class UserPermissionResource:
    """DELETE /api/users/{id}/permissions/{user_permission_id} - revoke assignment."""

    def __init__(self, revoke_permission_set: RevokePermissionSetUseCase) -> None:
        self._revoke = revoke_permission_set

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
        user_permission_id: str,
    ) -> None:
        user = current_user(req, resp)
        if not user:
            return
        try:
            await self._revoke.execute(
                user.user_id,
                parse_uuid(user_id, "user"),
                parse_uuid(user_permission_id, "user permission"),
            )
        except CampDeskError as e:
            set_error(resp, e)
            return
        resp.status = falcon.HTTP_204


class PermissionCheckResource:
    """GET /api/permissions/check?resource=&action= - caller's effective permission."""

    def __init__(self, check_permission: CheckPermissionUseCase) -> None:
        self._check = check_permission

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = current_user(req, resp)
        if not user:
            return
        resource = req.get_param("resource")
        action = req.get_param("action")
        if not resource or not action:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "resource and action are required"}
            return
        try:
            effective = await self._check.execute(user.user_id, resource, action)
        except CampDeskError as e:
            set_error(resp, e)
            return
        resp.media = {"hasPermission": effective.allowed, "scope": effective.scope}
        resp.status = falcon.HTTP_200
