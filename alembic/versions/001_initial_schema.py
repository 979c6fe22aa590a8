"""Initial schema - organization, user, camp, registration, permission tables.

Revision ID: 001
Revises:
Create Date: 2026-09-14

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "organization",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
    )

    op.create_table(
        "app_user",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("role", sa.String(50), nullable=False),
        sa.Column("organization_id", sa.UUID(), sa.ForeignKey("organization.id"), nullable=True),
        sa.Column("subject", sa.String(255), nullable=True),
        sa.Column("first_name", sa.String(255), nullable=True),
        sa.Column("last_name", sa.String(255), nullable=True),
    )
    op.create_index("ix_app_user_username", "app_user", ["username"], unique=True)
    op.create_index("ix_app_user_subject", "app_user", ["subject"], unique=True)
    op.create_index("ix_app_user_organization", "app_user", ["organization_id"])

    op.create_table(
        "camp",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("organization_id", sa.UUID(), sa.ForeignKey("organization.id"), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(255), nullable=True),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("registration_start_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("registration_end_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("capacity", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("waitlist_enabled", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_by", sa.UUID(), sa.ForeignKey("app_user.id"), nullable=True),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_cancelled", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_camp_organization", "camp", ["organization_id"])

    op.create_table(
        "registration",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("camp_id", sa.UUID(), sa.ForeignKey("camp.id", ondelete="CASCADE"), nullable=False),
        sa.Column("child_id", sa.UUID(), nullable=False),
        sa.Column("parent_id", sa.UUID(), sa.ForeignKey("app_user.id"), nullable=False),
        sa.Column("registered_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("paid", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("waitlisted", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_registration_camp", "registration", ["camp_id"])
    op.create_index("ix_registration_parent", "registration", ["parent_id"])

    op.create_table(
        "permission_set",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("organization_id", sa.UUID(), sa.ForeignKey("organization.id"), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_default", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("default_for_role", sa.String(50), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_permission_set_organization", "permission_set", ["organization_id"])
    op.create_index("ix_permission_set_role", "permission_set", ["default_for_role"])

    op.create_table(
        "permission",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column(
            "permission_set_id",
            sa.UUID(),
            sa.ForeignKey("permission_set.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("resource", sa.String(50), nullable=False),
        sa.Column("action", sa.String(50), nullable=False),
        sa.Column("scope", sa.String(50), nullable=False, server_default="organization"),
        sa.Column("allowed", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index(
        "ix_permission_set_resource_action",
        "permission",
        ["permission_set_id", "resource", "action"],
        unique=True,
    )

    op.create_table(
        "user_permission",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("user_id", sa.UUID(), sa.ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False),
        sa.Column(
            "permission_set_id",
            sa.UUID(),
            sa.ForeignKey("permission_set.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index(
        "ix_user_permission_user_set",
        "user_permission",
        ["user_id", "permission_set_id"],
        unique=True,
    )
    op.create_index("ix_user_permission_set", "user_permission", ["permission_set_id"])


def downgrade() -> None:
    op.drop_table("user_permission")
    op.drop_table("permission")
    op.drop_table("permission_set")
    op.drop_table("registration")
    op.drop_table("camp")
    op.drop_table("app_user")
    op.drop_table("organization")
