"""Child table; registrations reference a child owned by the registering parent.

Revision ID: 003
Revises: 002
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

revision: str = "003"
down_revision: str | None = "002"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "child",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("parent_id", sa.UUID(), sa.ForeignKey("app_user.id"), nullable=False),
        sa.Column("full_name", sa.Text(), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=True),
    )
    op.create_index("ix_child_parent", "child", ["parent_id"])
    op.create_foreign_key(
        "fk_registration_child", "registration", "child", ["child_id"], ["id"]
    )


def downgrade() -> None:
    op.drop_constraint("fk_registration_child", "registration", type_="foreignkey")
    op.drop_table("child")
