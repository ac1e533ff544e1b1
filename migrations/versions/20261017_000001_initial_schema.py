"""Initial schema.

Revision ID: 20261017_000001
Revises:
Create Date: 2026-10-17
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20261017_000001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "user",
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("path_to_icon", sa.String(length=500), nullable=True),
        sa.Column("roles_positions", sa.Text(), nullable=True),
        sa.Column("work_schedule", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("user_id"),
    )
    op.create_index(op.f("ix_user_email"), "user", ["email"], unique=True)

    op.create_table(
        "responsibilities_summary",
        sa.Column("responsibilities_id", sa.Integer(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["user.user_id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("responsibilities_id"),
    )
    op.create_index(
        op.f("ix_responsibilities_summary_user_id"),
        "responsibilities_summary",
        ["user_id"],
        unique=False,
    )

    op.create_table(
        "day",
        sa.Column("day_id", sa.Integer(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("time_in", sa.String(length=8), nullable=True),
        sa.Column("time_out", sa.String(length=8), nullable=True),
        sa.PrimaryKeyConstraint("day_id"),
    )
    op.create_index(op.f("ix_day_date"), "day", ["date"], unique=True)

    for table_name, pk_name in (("activity", "activity_id"), ("special_activity", "sp_activity_id")):
        op.create_table(
            table_name,
            sa.Column(pk_name, sa.Integer(), nullable=False),
            sa.Column("content", sa.Text(), nullable=False),
            sa.Column("time_start", sa.String(length=8), nullable=True),
            sa.Column("time_end", sa.String(length=8), nullable=True),
            sa.Column("category", sa.String(length=100), nullable=True),
            sa.Column("day_id", sa.Integer(), nullable=True),
            sa.ForeignKeyConstraint(["day_id"], ["day.day_id"], ondelete="CASCADE"),
            sa.PrimaryKeyConstraint(pk_name),
        )
        op.create_index(op.f(f"ix_{table_name}_day_id"), table_name, ["day_id"], unique=False)

    for table_name, pk_name in (("log_template", "log_template_id"), ("export_template", "export_template_id")):
        op.create_table(
            table_name,
            sa.Column(pk_name, sa.Integer(), nullable=False),
            sa.Column("name", sa.String(length=100), nullable=False),
            sa.Column("description", sa.String(length=500), nullable=True),
            sa.Column("color_code", sa.String(length=20), nullable=True),
            sa.Column("content_json", sa.Text(), nullable=True),
            sa.Column("date_created", sa.DateTime(timezone=True), nullable=False),
            sa.PrimaryKeyConstraint(pk_name),
        )


def downgrade() -> None:
    op.drop_table("export_template")
    op.drop_table("log_template")
    op.drop_index(op.f("ix_special_activity_day_id"), table_name="special_activity")
    op.drop_table("special_activity")
    op.drop_index(op.f("ix_activity_day_id"), table_name="activity")
    op.drop_table("activity")
    op.drop_index(op.f("ix_day_date"), table_name="day")
    op.drop_table("day")
    op.drop_index(op.f("ix_responsibilities_summary_user_id"), table_name="responsibilities_summary")
    op.drop_table("responsibilities_summary")
    op.drop_index(op.f("ix_user_email"), table_name="user")
    op.drop_table("user")
