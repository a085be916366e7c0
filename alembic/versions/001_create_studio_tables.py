"""Create members, plans, contracts, sessions and attendance."""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "001_create_studio_tables"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "members",
        sa.Column("id", sa.Uuid(), primary_key=True, nullable=False),
        sa.Column("studio_id", sa.Uuid(), nullable=False),
        sa.Column("first_name", sa.String(), nullable=False),
        sa.Column("last_name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("phone", sa.String(), nullable=True),
        sa.Column("status", sa.String(16), nullable=False, server_default=sa.text("'ACTIVE'")),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index("ix_members_studio_id", "members", ["studio_id"])

    op.create_table(
        "plans",
        sa.Column("id", sa.Uuid(), primary_key=True, nullable=False),
        sa.Column("studio_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("type", sa.String(16), nullable=False),
        sa.Column("class_limit", sa.Integer(), nullable=True),
        sa.Column("price_cents", sa.Integer(), nullable=False),
        sa.Column(
            "billing_period", sa.String(16), nullable=False, server_default=sa.text("'MONTHLY'")
        ),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index("ix_plans_studio_id", "plans", ["studio_id"])

    op.create_table(
        "contracts",
        sa.Column("id", sa.Uuid(), primary_key=True, nullable=False),
        sa.Column("studio_id", sa.Uuid(), nullable=False),
        sa.Column("member_id", sa.Uuid(), sa.ForeignKey("members.id"), nullable=False),
        sa.Column("plan_id", sa.Uuid(), sa.ForeignKey("plans.id"), nullable=False),
        sa.Column("status", sa.String(16), nullable=False, server_default=sa.text("'ACTIVE'")),
        sa.Column("plan_type_snapshot", sa.String(16), nullable=False),
        sa.Column("class_limit_snapshot", sa.Integer(), nullable=True),
        sa.Column("remaining_classes", sa.Integer(), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("paused_from", sa.Date(), nullable=True),
        sa.Column("paused_until", sa.Date(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.CheckConstraint(
            "remaining_classes IS NULL OR remaining_classes >= 0",
            name="ck_contract_remaining_classes_non_negative",
        ),
    )
    op.create_index("ix_contracts_studio_id", "contracts", ["studio_id"])
    op.create_index("ix_contracts_member_id", "contracts", ["member_id"])

    op.create_table(
        "sessions",
        sa.Column("id", sa.Uuid(), primary_key=True, nullable=False),
        sa.Column("studio_id", sa.Uuid(), nullable=False),
        sa.Column("class_type", sa.String(), nullable=False),
        sa.Column("coach", sa.String(), nullable=True),
        sa.Column("starts_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("ends_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("capacity", sa.Integer(), nullable=False),
        sa.Column(
            "status", sa.String(16), nullable=False, server_default=sa.text("'SCHEDULED'")
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.CheckConstraint(
            "ends_at IS NULL OR ends_at > starts_at", name="ck_session_ends_after_start"
        ),
        sa.CheckConstraint("capacity > 0", name="ck_session_capacity_positive"),
    )
    op.create_index("ix_sessions_studio_id", "sessions", ["studio_id"])

    op.create_table(
        "attendance",
        sa.Column("id", sa.Uuid(), primary_key=True, nullable=False),
        sa.Column("studio_id", sa.Uuid(), nullable=False),
        sa.Column("session_id", sa.Uuid(), sa.ForeignKey("sessions.id"), nullable=False),
        sa.Column("member_id", sa.Uuid(), sa.ForeignKey("members.id"), nullable=False),
        sa.Column(
            "status", sa.String(16), nullable=False, server_default=sa.text("'CHECKED_IN'")
        ),
        sa.Column("checked_in_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.UniqueConstraint(
            "studio_id", "session_id", "member_id", name="uq_attendance_natural_key"
        ),
    )
    op.create_index("ix_attendance_studio_id", "attendance", ["studio_id"])


def downgrade() -> None:
    op.drop_table("attendance")
    op.drop_table("sessions")
    op.drop_table("contracts")
    op.drop_table("plans")
    op.drop_table("members")
