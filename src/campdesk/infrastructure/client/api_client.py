"""HTTP client for the CampDesk API - permission views with fallback."""

import logging
from datetime import datetime
from uuid import UUID

import httpx

from campdesk.application.dto.permission_summary import AssignedSet, GrantRow, UserGroup
from campdesk.application.services.permission_projections import group_by_user
from campdesk.domain.entities import PermissionEntry, PermissionSet, User, UserPermission
from campdesk.domain.value_objects import UserRole

logger = logging.getLogger(__name__)

_FETCH_ERRORS = (httpx.HTTPError, KeyError, ValueError, TypeError)


def _dt(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


def parse_permission_set(data: dict) -> PermissionSet:
    set_id = UUID(data["id"])
    return PermissionSet(
        id=set_id,
        organization_id=UUID(data["organizationId"]),
        name=data["name"],
        description=data.get("description"),
        is_default=bool(data.get("isDefault")),
        default_for_role=(
            UserRole.parse(data["defaultForRole"]) if data.get("defaultForRole") else None
        ),
        created_at=_dt(data.get("createdAt")),
        updated_at=_dt(data.get("updatedAt")),
        permissions=[
            PermissionEntry(
                id=UUID(p["id"]),
                permission_set_id=set_id,
                resource=p["resource"],
                action=p["action"],
                allowed=bool(p["allowed"]),
                scope=p["scope"],
            )
            for p in data.get("permissions", [])
        ],
    )


def parse_user_group(data: dict) -> UserGroup:
    return UserGroup(
        user_id=UUID(data["userId"]),
        username=data["username"],
        name=data.get("name") or data["username"],
        email=data.get("email", ""),
        role=data["role"],
        permission_sets=[
            AssignedSet(
                id=UUID(s["id"]),
                name=s["name"],
                permissions=[
                    GrantRow(
                        resource=p["resource"],
                        action=p["action"],
                        allowed=bool(p["allowed"]),
                        scope=p["scope"],
                    )
                    for p in s.get("permissions", [])
                ],
            )
            for s in data.get("permissionSets", [])
        ],
    )


def _parse_member(data: dict, organization_id: UUID) -> User:
    return User(
        id=UUID(data["id"]),
        username=data["username"],
        email=data.get("email", ""),
        role=UserRole.parse(data.get("role")),
        organization_id=organization_id,
        first_name=data.get("firstName"),
        last_name=data.get("lastName"),
    )


def _parse_user_permission(data: dict) -> UserPermission:
    return UserPermission(
        id=UUID(data["id"]),
        user_id=UUID(data["userId"]),
        permission_set_id=UUID(data["permissionSetId"]),
        created_at=_dt(data.get("createdAt")),
        updated_at=_dt(data.get("updatedAt")),
    )


class CampDeskClient:
    """Synchronous API client.

    The by-user permission view prefers the server's pre-joined endpoint. When
    that call fails the view is recomputed from permission sets, team members
    and assignments; when that fails too, the last list fetched successfully
    for the organization is returned. Each source is tried once.
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        http_client: httpx.Client | None = None,
        timeout: float = 30.0,
    ) -> None:
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        self._http = http_client or httpx.Client(timeout=timeout)
        self._base_url = base_url.rstrip("/")
        self._headers = headers
        self._last_known_good: dict[UUID, list[UserGroup]] = {}

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "CampDeskClient":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def _get(self, path: str, **params: str) -> httpx.Response:
        r = self._http.get(f"{self._base_url}{path}", headers=self._headers, params=params)
        r.raise_for_status()
        return r

    def get_permission_sets(self, organization_id: UUID) -> list[PermissionSet]:
        r = self._get(f"/api/organizations/{organization_id}/permissions/sets")
        return [parse_permission_set(s) for s in r.json()]

    def get_team_members(self, organization_id: UUID) -> list[User]:
        r = self._get(f"/api/organizations/{organization_id}/team")
        return [_parse_member(m, organization_id) for m in r.json()]

    def get_user_permissions(self, user_id: UUID) -> list[UserPermission]:
        r = self._get(f"/api/users/{user_id}/permissions")
        return [_parse_user_permission(up) for up in r.json()]

    def export_permissions_csv(self, organization_id: UUID) -> str:
        return self._get(f"/api/organizations/{organization_id}/permissions/export").text

    def _fetch_user_view(self, organization_id: UUID) -> list[UserGroup]:
        r = self._get(f"/api/organizations/{organization_id}/permissions/users")
        return [parse_user_group(u) for u in r.json()]

    def _recompute_user_view(self, organization_id: UUID) -> list[UserGroup]:
        sets = self.get_permission_sets(organization_id)
        members = self.get_team_members(organization_id)
        assignments = []
        for member in members:
            assignments.extend(self.get_user_permissions(member.id))
        return group_by_user(members, sets, assignments)

    def get_user_permission_view(self, organization_id: UUID) -> list[UserGroup]:
        """By-user permission view for organization."""
        try:
            groups = self._fetch_user_view(organization_id)
        except _FETCH_ERRORS:
            logger.warning(
                "Fetching user permissions for %s failed, recomputing", organization_id,
                exc_info=True,
            )
            try:
                groups = self._recompute_user_view(organization_id)
            except _FETCH_ERRORS:
                logger.error(
                    "Recomputing user permissions for %s failed", organization_id,
                    exc_info=True,
                )
                return list(self._last_known_good.get(organization_id, []))
        self._last_known_good[organization_id] = groups
        return groups
