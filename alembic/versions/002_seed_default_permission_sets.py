"""Seed default permission sets for every organization and staff role.

Revision ID: 002
Revises: 001
Create Date: 2026-09-15

"""

from collections.abc import Sequence

from alembic import op

revision: str = "002"
down_revision: str | None = "001"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

# role -> (set name, description, [(resource, action), ...]); all organization scope
DEFAULT_SETS = {
    "camp_creator": (
        "Camp Creator Default Permissions",
        "Default permissions for Camp Creators",
        [
            ("camps", "view"), ("camps", "create"), ("camps", "edit"), ("camps", "delete"),
            ("team", "view"), ("team", "create"), ("team", "edit"), ("team", "delete"),
            ("documents", "view"), ("documents", "create"), ("documents", "edit"),
        ],
    ),
    "manager": (
        "Manager Default Permissions",
        "Default permissions for Managers",
        [("camps", "view"), ("camps", "edit"), ("team", "view")],
    ),
    "coach": (
        "Coach Default Permissions",
        "Default permissions for Coaches",
        [("camps", "view"), ("sessions", "view"), ("athletes", "view")],
    ),
    "volunteer": (
        "Volunteer Default Permissions",
        "Default permissions for Volunteers",
        [("camps", "view"), ("sessions", "view")],
    ),
}


def upgrade() -> None:
    for role, (name, description, grants) in DEFAULT_SETS.items():
        op.execute(f"""
            INSERT INTO permission_set (id, organization_id, name, description, is_default, default_for_role)
            SELECT gen_random_uuid(), id, '{name}', '{description}', TRUE, '{role}'
            FROM organization
        """)
        for resource, action in grants:
            op.execute(f"""
                INSERT INTO permission (id, permission_set_id, resource, action, scope, allowed)
                SELECT gen_random_uuid(), ps.id, '{resource}', '{action}', 'organization', TRUE
                FROM permission_set ps
                WHERE ps.default_for_role = '{role}' AND ps.is_default
            """)


def downgrade() -> None:
    roles = ", ".join(f"'{role}'" for role in DEFAULT_SETS)
    op.execute(f"DELETE FROM permission_set WHERE is_default AND default_for_role IN ({roles})")
