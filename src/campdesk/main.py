"""Application entry point and composition root."""

import logging

import falcon
import falcon.asgi

from campdesk import __version__
from campdesk.application.use_cases.camp.get_camp import GetCampUseCase
from campdesk.application.use_cases.camp.list_camp_registrations import (
    ListCampRegistrationsUseCase,
)
from campdesk.application.use_cases.dashboard.get_dashboard import GetDashboardUseCase
from campdesk.application.use_cases.permission.add_permission_entry import (
    AddPermissionEntryUseCase,
)
from campdesk.application.use_cases.permission.assign_permission_set import (
    AssignPermissionSetUseCase,
)
from campdesk.application.use_cases.permission.check_permission import CheckPermissionUseCase
from campdesk.application.use_cases.permission.create_permission_set import (
    CreatePermissionSetUseCase,
)
from campdesk.application.use_cases.permission.delete_permission_set import (
    DeletePermissionSetUseCase,
)
from campdesk.application.use_cases.permission.export_permissions import (
    ExportPermissionsUseCase,
)
from campdesk.application.use_cases.permission.list_permission_sets import (
    ListPermissionSetsUseCase,
)
from campdesk.application.use_cases.permission.list_user_permissions import (
    ListUserPermissionsUseCase,
)
from campdesk.application.use_cases.permission.remove_permission_entry import (
    RemovePermissionEntryUseCase,
)
from campdesk.application.use_cases.permission.revoke_permission_set import (
    RevokePermissionSetUseCase,
)
from campdesk.application.use_cases.permission.summarize_permissions import (
    SummarizePermissionsUseCase,
)
from campdesk.application.use_cases.permission.update_permission_entry import (
    UpdatePermissionEntryUseCase,
)
from campdesk.application.use_cases.permission.update_permission_set import (
    UpdatePermissionSetUseCase,
)
from campdesk.application.use_cases.registration.register_athlete import (
    RegisterAthleteUseCase,
)
from campdesk.application.use_cases.team.list_team_members import ListTeamMembersUseCase
from campdesk.config import get_settings
from campdesk.infrastructure.auth.keycloak_provider import KeycloakProvider
from campdesk.infrastructure.permission.permission_checker import CampDeskPermissionChecker
from campdesk.infrastructure.persistence.postgres.connection import create_pool, ping
from campdesk.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from campdesk.interfaces.api.middleware.auth import AuthMiddleware
from campdesk.interfaces.api.middleware.cors import CORSMiddleware
from campdesk.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from campdesk.interfaces.api.resources.camps import CampRegistrationsResource, CampResource
from campdesk.interfaces.api.resources.dashboard import DashboardResource
from campdesk.interfaces.api.resources.health import HealthResource
from campdesk.interfaces.api.resources.permission_sets import (
    PermissionEntriesResource,
    PermissionEntryResource,
    PermissionSetResource,
    PermissionSetsResource,
)
from campdesk.interfaces.api.resources.permission_summary import (
    OrganizationUserPermissionsResource,
    PermissionExportResource,
    PermissionSummaryResource,
    TeamResource,
)
from campdesk.interfaces.api.resources.user_permissions import (
    PermissionCheckResource,
    UserPermissionResource,
    UserPermissionsResource,
)
from campdesk.logging_config import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """CLI entry point - run the API server."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings)
    logger.info("CampDesk v%s starting (%s)", __version__, settings.environment)
    uvicorn.run(create_campdesk_app(), host="0.0.0.0", port=8000, log_config=None)


def add_routes(app: falcon.asgi.App, uow_factory, permission_checker, readiness_check=None) -> None:
    """Build use cases and register every API route on app."""
    list_sets = ListPermissionSetsUseCase(uow_factory)
    summarize = SummarizePermissionsUseCase(uow_factory)

    app.add_route("/api/health", HealthResource(readiness_check))
    app.add_route("/api/health/ready", HealthResource(readiness_check), suffix="ready")
    app.add_route(
        "/api/organizations/{organization_id}/permissions/sets",
        PermissionSetsResource(list_sets, CreatePermissionSetUseCase(uow_factory)),
    )
    app.add_route(
        "/api/organizations/{organization_id}/permissions/users",
        OrganizationUserPermissionsResource(summarize),
    )
    app.add_route(
        "/api/organizations/{organization_id}/permissions/summary",
        PermissionSummaryResource(summarize),
    )
    app.add_route(
        "/api/organizations/{organization_id}/permissions/export",
        PermissionExportResource(ExportPermissionsUseCase(uow_factory)),
    )
    app.add_route(
        "/api/organizations/{organization_id}/team",
        TeamResource(ListTeamMembersUseCase(uow_factory)),
    )
    app.add_route(
        "/api/permissions/sets/{permission_set_id}",
        PermissionSetResource(
            list_sets,
            UpdatePermissionSetUseCase(uow_factory),
            DeletePermissionSetUseCase(uow_factory),
        ),
    )
    app.add_route(
        "/api/permissions/sets/{permission_set_id}/permissions",
        PermissionEntriesResource(AddPermissionEntryUseCase(uow_factory)),
    )
    app.add_route(
        "/api/permissions/check",
        PermissionCheckResource(CheckPermissionUseCase(uow_factory, permission_checker)),
    )
    app.add_route(
        "/api/permissions/{entry_id}",
        PermissionEntryResource(
            UpdatePermissionEntryUseCase(uow_factory),
            RemovePermissionEntryUseCase(uow_factory),
        ),
    )
    app.add_route(
        "/api/users/{user_id}/permissions",
        UserPermissionsResource(
            ListUserPermissionsUseCase(uow_factory),
            AssignPermissionSetUseCase(uow_factory),
        ),
    )
    app.add_route(
        "/api/users/{user_id}/permissions/{user_permission_id}",
        UserPermissionResource(RevokePermissionSetUseCase(uow_factory)),
    )
    app.add_route(
        "/api/camps/{camp_id}",
        CampResource(GetCampUseCase(uow_factory, permission_checker)),
    )
    app.add_route(
        "/api/camps/{camp_id}/registrations",
        CampRegistrationsResource(
            ListCampRegistrationsUseCase(uow_factory, permission_checker),
            RegisterAthleteUseCase(uow_factory),
        ),
    )
    app.add_route("/api/dashboard", DashboardResource(GetDashboardUseCase(uow_factory)))


def create_campdesk_app() -> falcon.asgi.App:
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    pool = create_pool(
        settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None:
        logger.warning("KEYCLOAK_CLIENT_SECRET not set; bearer tokens will be rejected")

    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app = falcon.asgi.App(
        middleware=[
            CORSMiddleware(cors_origins),
            PoolLifespanMiddleware(pool),
            AuthMiddleware(keycloak),
        ],
    )

    async def log_exception(req, resp, ex, params):
        logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
        resp.status = falcon.HTTP_500
        resp.media = {"title": "500 Internal Server Error"}

    app.add_error_handler(Exception, log_exception)
    add_routes(
        app,
        uow_factory,
        CampDeskPermissionChecker(uow_factory),
        readiness_check=lambda: ping(pool),
    )
    return app
