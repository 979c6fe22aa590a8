#!/usr/bin/env python3
"""Export an organization's permission summary.

Usage:
  export API_URL=http://localhost:8000 KEYCLOAK_URL=http://localhost:8080
  export KEYCLOAK_CLIENT_SECRET=... CAMPDESK_USER=... CAMPDESK_PASSWORD=...
  uv run python scripts/export_permissions.py <organization-id> [--output permissions_summary.csv]
  uv run python scripts/export_permissions.py <organization-id> --users
"""
from __future__ import annotations

import argparse
import os
import sys
from uuid import UUID

import httpx

from campdesk.config import get_settings
from campdesk.infrastructure.client.api_client import CampDeskClient
from campdesk.logging_config import configure_logging


def get_token(
    keycloak_url: str,
    realm: str,
    client_id: str,
    client_secret: str,
    username: str,
    password: str,
) -> str:
    url = f"{keycloak_url.rstrip('/')}/realms/{realm}/protocol/openid-connect/token"
    r = httpx.post(
        url,
        data={
            "grant_type": "password",
            "client_id": client_id,
            "client_secret": client_secret,
            "username": username,
            "password": password,
        },
        headers={"Content-Type": "application/x-www-form-urlencoded"},
        timeout=30.0,
    )
    r.raise_for_status()
    return r.json()["access_token"]


def main() -> int:
    parser = argparse.ArgumentParser(description="Export permission summary")
    parser.add_argument("organization_id", type=UUID, help="Organization to export")
    parser.add_argument("--output", type=str, default="permissions_summary.csv", help="CSV output path")
    parser.add_argument("--users", action="store_true", help="Print the by-user view instead of CSV")
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings)
    api_url = os.environ.get("API_URL", settings.api_base_url).rstrip("/")
    user = os.environ.get("CAMPDESK_USER", "admin")
    password = os.environ.get("CAMPDESK_PASSWORD", "admin")

    try:
        token = get_token(
            settings.keycloak_url,
            settings.keycloak_realm,
            settings.keycloak_client_id,
            settings.keycloak_client_secret,
            user,
            password,
        )
    except httpx.HTTPError as e:
        print(f"Failed to get token: {e}", file=sys.stderr)
        return 1

    with CampDeskClient(api_url, token=token) as client:
        if args.users:
            for group in client.get_user_permission_view(args.organization_id):
                print(f"{group.name} ({group.role}): {group.description}")
            return 0
        try:
            csv_text = client.export_permissions_csv(args.organization_id)
        except httpx.HTTPError as e:
            print(f"Export failed: {e}", file=sys.stderr)
            return 1

    with open(args.output, "w", encoding="utf-8", newline="") as f:
        f.write(csv_text)
    print(f"Wrote {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
