"""Fixtures for API tests."""

import falcon.asgi
import pytest

from campdesk.domain.value_objects import UserRole
from campdesk.infrastructure.permission.permission_checker import CampDeskPermissionChecker
from campdesk.interfaces.api.middleware.auth import RequestUser
from campdesk.main import add_routes

from tests.conftest import make_user

SUBJECT_HEADER = "X-Test-Subject"


class AuthBypassMiddleware:
    """Middleware that sets context.user for testing; the subject comes from a header."""

    async def process_request(self, req, resp):
        req.context.user = RequestUser(user_id=req.get_header(SUBJECT_HEADER) or "sub-creator")


@pytest.fixture
def members(fake_uow, organization_id):
    """Camp creator, coach and parent, addressed by their auth subjects."""
    users = {
        "creator": make_user(UserRole.CAMP_CREATOR, organization_id, username="creator"),
        "coach": make_user(UserRole.COACH, organization_id, username="coach"),
        "parent": make_user(UserRole.PARENT, None, username="parent"),
    }
    for user in users.values():
        fake_uow.users.add_user(user)
    return users


@pytest.fixture
def app(uow_factory, members):
    """Falcon ASGI app with all API routes over the in-memory unit of work."""
    app = falcon.asgi.App(middleware=[AuthBypassMiddleware()])
    add_routes(app, uow_factory, CampDeskPermissionChecker(uow_factory))
    return app


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    from falcon.testing import TestClient
    return TestClient(app)


def as_user(name: str) -> dict:
    return {SUBJECT_HEADER: f"sub-{name}"}
