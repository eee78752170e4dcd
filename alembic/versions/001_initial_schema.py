"""Initial schema - tenants, directory, roles, dashboards and their mappings.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _scope_columns() -> list[sa.Column]:
    return [
        sa.Column("tenant_id", sa.Integer(), sa.ForeignKey("tenant.id"), nullable=False),
        sa.Column("subtenant_id", sa.Integer(), sa.ForeignKey("subtenant.id"), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "tenant",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("tenant_code", sa.String(64), nullable=False),
        sa.Column("status", sa.String(16), nullable=False, server_default="ACTIVE"),
    )
    op.create_index("ix_tenant_code", "tenant", ["tenant_code"], unique=True)

    op.create_table(
        "subtenant",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("tenant_id", sa.Integer(), sa.ForeignKey("tenant.id", ondelete="CASCADE"), nullable=False),
        sa.Column("subtenant_code", sa.String(64), nullable=False),
        sa.Column("status", sa.String(16), nullable=False, server_default="ACTIVE"),
    )
    op.create_index(
        "ix_subtenant_tenant_code", "subtenant", ["tenant_id", "subtenant_code"], unique=True
    )

    op.create_table(
        "identity_profile",
        sa.Column("id", sa.Integer(), primary_key=True),
        *_scope_columns(),
        sa.Column("profile_name", sa.String(255), nullable=False),
    )

    op.create_table(
        "identity_profile_attrcfg",
        sa.Column("id", sa.Integer(), primary_key=True),
        *_scope_columns(),
        sa.Column(
            "profile_id",
            sa.Integer(),
            sa.ForeignKey("identity_profile.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("display_attr", sa.String(64), nullable=True),
    )

    op.create_table(
        "app_user",
        sa.Column("id", sa.Integer(), primary_key=True),
        *_scope_columns(),
        sa.Column("profile_id", sa.Integer(), sa.ForeignKey("identity_profile.id"), nullable=False),
        sa.Column("user_attrs", JSONB(), nullable=True),
        sa.Column("status", sa.String(16), nullable=False, server_default="ACTIVE"),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_app_user_scope", "app_user", ["tenant_id", "subtenant_id"])

    op.create_table(
        "role",
        sa.Column("id", sa.Integer(), primary_key=True),
        *_scope_columns(),
        sa.Column("role_name", sa.String(255), nullable=False),
        sa.Column("role_type", sa.String(64), nullable=False),
    )

    op.create_table(
        "role_member",
        sa.Column("role_id", sa.Integer(), sa.ForeignKey("role.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("app_user.id", ondelete="CASCADE"), primary_key=True),
    )

    op.create_table(
        "dashboard",
        sa.Column("id", sa.Integer(), primary_key=True),
        *_scope_columns(),
        sa.Column("dashboard_name", sa.String(255), nullable=False),
        sa.Column("dashboard_desc", sa.Text(), nullable=True),
        sa.Column("widget_cfg", JSONB(), nullable=True),
    )
    op.create_index("ix_dashboard_scope", "dashboard", ["tenant_id", "subtenant_id"])

    op.create_table(
        "dashboard_widget",
        sa.Column("id", sa.Integer(), primary_key=True),
        *_scope_columns(),
        sa.Column("widget_name", sa.String(255), nullable=False),
        sa.Column("widget_desc", sa.Text(), nullable=True),
        sa.Column("widget_url", sa.Text(), nullable=True),
        sa.Column("widget_chart", sa.String(64), nullable=True),
        sa.Column("widget_filter", sa.Text(), nullable=True),
    )

    op.create_table(
        "dashboard_widget_map",
        sa.Column("id", sa.Integer(), primary_key=True),
        *_scope_columns(),
        sa.Column("dashboard_id", sa.Integer(), sa.ForeignKey("dashboard.id", ondelete="CASCADE"), nullable=False),
        sa.Column("widget_id", sa.Integer(), sa.ForeignKey("dashboard_widget.id", ondelete="CASCADE"), nullable=False),
    )

    # user_id has no foreign key: mappings may outlive directory users.
    op.create_table(
        "dashboard_user_map",
        sa.Column("id", sa.Integer(), primary_key=True),
        *_scope_columns(),
        sa.Column("dashboard_id", sa.Integer(), sa.ForeignKey("dashboard.id", ondelete="CASCADE"), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
    )
    op.create_index(
        "ix_dashboard_user_map_unique",
        "dashboard_user_map",
        ["dashboard_id", "user_id"],
        unique=True,
    )
    op.create_index("ix_dashboard_user_map_user", "dashboard_user_map", ["user_id"])


def downgrade() -> None:
    op.drop_table("dashboard_user_map")
    op.drop_table("dashboard_widget_map")
    op.drop_table("dashboard_widget")
    op.drop_table("dashboard")
    op.drop_table("role_member")
    op.drop_table("role")
    op.drop_table("app_user")
    op.drop_table("identity_profile_attrcfg")
    op.drop_table("identity_profile")
    op.drop_table("subtenant")
    op.drop_table("tenant")
