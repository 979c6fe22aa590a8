"""Dashboard API resource."""

import falcon
import falcon.asgi

from campdesk.application.use_cases.dashboard.get_dashboard import GetDashboardUseCase
from campdesk.domain.exceptions import CampDeskError
from campdesk.interfaces.api.resources.common import current_user, set_error
from campdesk.interfaces.api.serializers import dashboard_to_json


class DashboardResource:
    """GET /api/dashboard - landing data for the caller's role."""

    def __init__(self, get_dashboard: GetDashboardUseCase) -> None:
        self._get_dashboard = get_dashboard

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = current_user(req, resp)
        if not user:
            return
        try:
            dashboard = await self._get_dashboard.execute(user.user_id)
        except CampDeskError as e:
            set_error(resp, e)
            return
        resp.media = dashboard_to_json(dashboard)
        resp.status = falcon.HTTP_200
