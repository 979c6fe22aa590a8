"""Camp and registration API resources."""

import falcon
import falcon.asgi

from campdesk.application.use_cases.camp.get_camp import GetCampUseCase
from campdesk.application.use_cases.camp.list_camp_registrations import (
    ListCampRegistrationsUseCase,
)
from campdesk.application.use_cases.registration.register_athlete import (
    RegisterAthleteUseCase,
)
from campdesk.domain.exceptions import CampDeskError, ValidationError
from campdesk.interfaces.api.resources.common import (
    current_user,
    parse_uuid,
    read_body,
    set_error,
)
from campdesk.interfaces.api.serializers import camp_output_to_json, registration_to_json


class CampResource:
    """GET /api/camps/{id} - camp with registration status and canManage."""

    def __init__(self, get_camp: GetCampUseCase) -> None:
        self._get_camp = get_camp

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, camp_id: str
    ) -> None:
        user = getattr(req.context, "user", None)
        try:
            output = await self._get_camp.execute(
                user.user_id if user else None, parse_uuid(camp_id, "camp")
            )
        except CampDeskError as e:
            set_error(resp, e)
            return
        resp.media = camp_output_to_json(output)
        resp.status = falcon.HTTP_200


class CampRegistrationsResource:
    """GET/POST /api/camps/{id}/registrations."""

    def __init__(
        self,
        list_camp_registrations: ListCampRegistrationsUseCase,
        register_athlete: RegisterAthleteUseCase,
    ) -> None:
        self._list = list_camp_registrations
        self._register = register_athlete

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, camp_id: str
    ) -> None:
        """List registrations visible to the caller."""
        user = current_user(req, resp)
        if not user:
            return
        try:
            output = await self._list.execute(user.user_id, parse_uuid(camp_id, "camp"))
        except CampDeskError as e:
            set_error(resp, e)
            return
        resp.media = {
            "registrations": [registration_to_json(r) for r in output.registrations],
            "permissions": {
                "canManage": output.can_manage,
                "canViewAll": output.can_view_all,
            },
        }
        resp.status = falcon.HTTP_200

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, camp_id: str
    ) -> None:
        """Register a child. Capacity and window conflicts return 409 with a code."""
        user = current_user(req, resp)
        if not user:
            return
        try:
            parsed_camp_id = parse_uuid(camp_id, "camp")
            body = await read_body(req)
            if "childId" not in body:
                raise ValidationError("Missing required field: 'childId'")
            child_id = parse_uuid(str(body["childId"]), "child")
            registration = await self._register.execute(user.user_id, parsed_camp_id, child_id)
        except CampDeskError as e:
            set_error(resp, e)
            return
        resp.media = registration_to_json(registration)
        resp.status = falcon.HTTP_201
