"""Permission set API resources."""

import falcon
import falcon.asgi

from campdesk.application.dto.permission_input import (
    PermissionEntryInput,
    PermissionSetInput,
)
from campdesk.application.use_cases.permission.add_permission_entry import (
    AddPermissionEntryUseCase,
)
from campdesk.application.use_cases.permission.create_permission_set import (
    CreatePermissionSetUseCase,
)
from campdesk.application.use_cases.permission.delete_permission_set import (
    DeletePermissionSetUseCase,
)
from campdesk.application.use_cases.permission.list_permission_sets import (
    ListPermissionSetsUseCase,
)
from campdesk.application.use_cases.permission.remove_permission_entry import (
    RemovePermissionEntryUseCase,
)
from campdesk.application.use_cases.permission.update_permission_entry import (
    UpdatePermissionEntryUseCase,
)
from campdesk.application.use_cases.permission.update_permission_set import (
    UpdatePermissionSetUseCase,
)
from campdesk.domain.exceptions import CampDeskError, ValidationError
from campdesk.interfaces.api.resources.common import (
    current_user,
    parse_uuid,
    read_body,
    set_error,
)
from campdesk.interfaces.api.serializers import entry_to_json, permission_set_to_json


_MISSING = object()


def _field(body: dict, key: str, kind: type, default=_MISSING, nullable: bool = False):
    """Read a JSON field of the given type; a wrong type is a validation error."""
    if key not in body:
        if default is _MISSING:
            raise ValidationError(f"Missing required field: '{key}'")
        return default
    value = body[key]
    if value is None and nullable:
        return None
    if type(value) is not kind:
        raise ValidationError(f"Field '{key}' must be a {'boolean' if kind is bool else 'string'}")
    return value


def _set_input(body: dict) -> PermissionSetInput:
    return PermissionSetInput(
        name=_field(body, "name", str),
        description=_field(body, "description", str, default=None, nullable=True),
        is_default=_field(body, "isDefault", bool, default=False),
        default_for_role=_field(body, "defaultForRole", str, default=None, nullable=True),
    )


def _entry_input(body: dict) -> PermissionEntryInput:
    return PermissionEntryInput(
        resource=_field(body, "resource", str),
        action=_field(body, "action", str),
        allowed=_field(body, "allowed", bool, default=False),
        scope=_field(body, "scope", str, default="organization"),
    )


class PermissionSetsResource:
    """GET/POST /api/organizations/{id}/permissions/sets - list and create sets."""

    def __init__(
        self,
        list_permission_sets: ListPermissionSetsUseCase,
        create_permission_set: CreatePermissionSetUseCase,
    ) -> None:
        self._list = list_permission_sets
        self._create = create_permission_set

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, organization_id: str
    ) -> None:
        """List permission sets of organization."""
        user = current_user(req, resp)
        if not user:
            return
        try:
            sets = await self._list.execute(
                user.user_id, parse_uuid(organization_id, "organization")
            )
        except CampDeskError as e:
            set_error(resp, e)
            return
        resp.media = [permission_set_to_json(s) for s in sets]
        resp.status = falcon.HTTP_200

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, organization_id: str
    ) -> None:
        """Create permission set."""
        user = current_user(req, resp)
        if not user:
            return
        try:
            org_id = parse_uuid(organization_id, "organization")
            data = _set_input(await read_body(req))
            permission_set = await self._create.execute(user.user_id, org_id, data)
        except CampDeskError as e:
            set_error(resp, e)
            return
        resp.media = permission_set_to_json(permission_set)
        resp.status = falcon.HTTP_201


class PermissionSetResource:
    """GET/PUT/DELETE /api/permissions/sets/{id}."""

    def __init__(
        self,
        list_permission_sets: ListPermissionSetsUseCase,
        update_permission_set: UpdatePermissionSetUseCase,
        delete_permission_set: DeletePermissionSetUseCase,
    ) -> None:
        self._list = list_permission_sets
        self._update = update_permission_set
        self._delete = delete_permission_set

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, permission_set_id: str
    ) -> None:
        """Get permission set with entries."""
        user = current_user(req, resp)
        if not user:
            return
        try:
            permission_set = await self._list.get(
                user.user_id, parse_uuid(permission_set_id, "permission set")
            )
        except CampDeskError as e:
            set_error(resp, e)
            return
        resp.media = permission_set_to_json(permission_set)
        resp.status = falcon.HTTP_200

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, permission_set_id: str
    ) -> None:
        """Update permission set."""
        user = current_user(req, resp)
        if not user:
            return
        try:
            set_id = parse_uuid(permission_set_id, "permission set")
            data = _set_input(await read_body(req))
            permission_set = await self._update.execute(user.user_id, set_id, data)
        except CampDeskError as e:
            set_error(resp, e)
            return
        resp.media = permission_set_to_json(permission_set)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, permission_set_id: str
    ) -> None:
        """Delete permission set."""
        user = current_user(req, resp)
        if not user:
            return
        try:
            await self._delete.execute(
                user.user_id, parse_uuid(permission_set_id, "permission set")
            )
        except CampDeskError as e:
            set_error(resp, e)
            return
        resp.status = falcon.HTTP_204


class PermissionEntriesResource:
    """POST /api/permissions/sets/{id}/permissions - add entry."""

    def __init__(self, add_permission_entry: AddPermissionEntryUseCase) -> None:
        self._add = add_permission_entry

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, permission_set_id: str
    ) -> None:
        user = current_user(req, resp)
        if not user:
            return
        try:
            set_id = parse_uuid(permission_set_id, "permission set")
            data = _entry_input(await read_body(req))
            entry = await self._add.execute(user.user_id, set_id, data)
        except CampDeskError as e:
            set_error(resp, e)
            return
        resp.media = entry_to_json(entry)
        resp.status = falcon.HTTP_201


class PermissionEntryResource:
    """PUT/DELETE /api/permissions/{id} - update or remove entry."""

    def __init__(
        self,
        update_permission_entry: UpdatePermissionEntryUseCase,
        remove_permission_entry: RemovePermissionEntryUseCase,
    ) -> None:
        self._update = update_permission_entry
        self._remove = remove_permission_entry

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, entry_id: str
    ) -> None:
        user = current_user(req, resp)
        if not user:
            return
        try:
            parsed_id = parse_uuid(entry_id, "permission")
            data = _entry_input(await read_body(req))
            entry = await self._update.execute(user.user_id, parsed_id, data)
        except CampDeskError as e:
            set_error(resp, e)
            return
        resp.media = entry_to_json(entry)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, entry_id: str
    ) -> None:
        user = current_user(req, resp)
        if not user:
            return
        try:
            await self._remove.execute(user.user_id, parse_uuid(entry_id, "permission"))
        except CampDeskError as e:
            set_error(resp, e)
            return
        resp.status = falcon.HTTP_204
