"""Unit tests for the API client's by-user permission view fallback."""

from uuid import uuid4

import httpx
import pytest

from campdesk.infrastructure.client.api_client import CampDeskClient

ORG = uuid4()
COACH_ID = uuid4()
SET_ID = uuid4()
BASE = "http://campdesk.test"

USERS_PATH = f"/api/organizations/{ORG}/permissions/users"
SETS_PATH = f"/api/organizations/{ORG}/permissions/sets"
TEAM_PATH = f"/api/organizations/{ORG}/team"
ASSIGNMENTS_PATH = f"/api/users/{COACH_ID}/permissions"

USER_VIEW = [
    {
        "userId": str(COACH_ID),
        "username": "coach",
        "name": "Dana Reyes",
        "email": "coach@example.com",
        "role": "coach",
        "permissionSets": [
            {
                "id": str(SET_ID),
                "name": "Senior Coach",
                "permissions": [
                    {"resource": "camps", "action": "edit", "allowed": True, "scope": "own"}
                ],
            }
        ],
    }
]

SETS = [
    {
        "id": str(SET_ID),
        "organizationId": str(ORG),
        "name": "Senior Coach",
        "description": None,
        "isDefault": False,
        "defaultForRole": None,
        "createdAt": "2026-06-01T12:00:00+00:00",
        "updatedAt": "2026-06-01T12:00:00+00:00",
        "permissions": [
            {
                "id": str(uuid4()),
                "permissionSetId": str(SET_ID),
                "resource": "camps",
                "action": "edit",
                "allowed": True,
                "scope": "own",
            }
        ],
    }
]

TEAM = [
    {
        "id": str(COACH_ID),
        "username": "coach",
        "email": "coach@example.com",
        "firstName": "Dana",
        "lastName": "Reyes",
        "role": "coach",
    }
]


class Backend:
    """Serves canned responses; paths in `failing` answer 500."""

    def __init__(self, assignments: list | None = None) -> None:
        self.failing: set[str] = set()
        self.calls: list[str] = []
        self.routes = {
            USERS_PATH: USER_VIEW,
            SETS_PATH: SETS,
            TEAM_PATH: TEAM,
            ASSIGNMENTS_PATH: assignments or [],
        }

    def __call__(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.calls.append(path)
        if path in self.failing or path not in self.routes:
            return httpx.Response(500, json={"error": "boom"})
        return httpx.Response(200, json=self.routes[path])


@pytest.fixture
def backend() -> Backend:
    return Backend(
        assignments=[
            {
                "id": str(uuid4()),
                "userId": str(COACH_ID),
                "permissionSetId": str(SET_ID),
                "createdAt": "2026-06-02T09:00:00+00:00",
                "updatedAt": "2026-06-02T09:00:00+00:00",
            }
        ]
    )


@pytest.fixture
def client(backend: Backend) -> CampDeskClient:
    return CampDeskClient(
        BASE, token="t", http_client=httpx.Client(transport=httpx.MockTransport(backend))
    )


def test_prefers_pre_joined_endpoint(client: CampDeskClient, backend: Backend) -> None:
    (group,) = client.get_user_permission_view(ORG)

    assert group.user_id == COACH_ID
    assert group.permission_sets[0].name == "Senior Coach"
    assert backend.calls == [USERS_PATH]


def test_recomputes_when_endpoint_fails(client: CampDeskClient, backend: Backend) -> None:
    backend.failing.add(USERS_PATH)

    (group,) = client.get_user_permission_view(ORG)

    assert group.name == "Dana Reyes"
    assert [s.name for s in group.permission_sets] == ["Senior Coach"]
    assert group.permission_sets[0].permissions[0].scope == "own"
    assert backend.calls == [USERS_PATH, SETS_PATH, TEAM_PATH, ASSIGNMENTS_PATH]


def test_recomputed_member_without_assignments_uses_defaults(backend: Backend) -> None:
    backend.routes[ASSIGNMENTS_PATH] = []
    backend.failing.add(USERS_PATH)
    client = CampDeskClient(BASE, http_client=httpx.Client(transport=httpx.MockTransport(backend)))

    (group,) = client.get_user_permission_view(ORG)

    assert group.uses_defaults is True
    assert group.description == "using default permissions for Coach"


def test_last_known_good_when_everything_fails(client: CampDeskClient, backend: Backend) -> None:
    first = client.get_user_permission_view(ORG)
    backend.failing.update({USERS_PATH, SETS_PATH})

    second = client.get_user_permission_view(ORG)

    assert second == first
    assert second is not first


def test_empty_without_prior_success(client: CampDeskClient, backend: Backend) -> None:
    backend.failing.update({USERS_PATH, TEAM_PATH})

    assert client.get_user_permission_view(ORG) == []


def test_single_attempt_per_source(client: CampDeskClient, backend: Backend) -> None:
    backend.failing.update({USERS_PATH, SETS_PATH})

    client.get_user_permission_view(ORG)

    assert backend.calls == [USERS_PATH, SETS_PATH]


def test_transport_error_falls_back(backend: Backend) -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == USERS_PATH:
            raise httpx.ConnectError("connection refused", request=request)
        return backend(request)

    client = CampDeskClient(BASE, http_client=httpx.Client(transport=httpx.MockTransport(_handler)))

    (group,) = client.get_user_permission_view(ORG)

    assert group.username == "coach"


def test_bearer_token_sent(backend: Backend) -> None:
    seen = []

    def _handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.headers.get("Authorization"))
        return backend(request)

    client = CampDeskClient(
        BASE, token="abc", http_client=httpx.Client(transport=httpx.MockTransport(_handler))
    )
    client.get_permission_sets(ORG)

    assert seen == ["Bearer abc"]


def test_recompute_orders_undated_assignments_last(backend: Backend) -> None:
    staff_id = uuid4()
    backend.routes[SETS_PATH] = SETS + [
        {**SETS[0], "id": str(staff_id), "name": "Camp Staff", "permissions": []}
    ]
    backend.routes[ASSIGNMENTS_PATH] = [
        {"id": str(uuid4()), "userId": str(COACH_ID), "permissionSetId": str(staff_id)},
        {
            "id": str(uuid4()),
            "userId": str(COACH_ID),
            "permissionSetId": str(SET_ID),
            "createdAt": "2026-06-02T09:00:00+00:00",
        },
    ]
    backend.failing.add(USERS_PATH)
    client = CampDeskClient(BASE, http_client=httpx.Client(transport=httpx.MockTransport(backend)))

    (group,) = client.get_user_permission_view(ORG)

    assert [s.name for s in group.permission_sets] == ["Senior Coach", "Camp Staff"]
