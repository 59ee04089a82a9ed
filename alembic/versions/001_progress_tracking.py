"""Progress tracking: progress_logs + user_goals tables.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # progress_logs: append-only daily self-reports
    op.create_table(
        "progress_logs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.String(length=64), nullable=False),
        sa.Column("weight", sa.Float(), nullable=True),
        sa.Column("body_fat", sa.Float(), nullable=True),
        sa.Column("calories_intake", sa.Integer(), nullable=True),
        sa.Column("protein_intake", sa.Integer(), nullable=True),
        sa.Column("workout_completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("workout_type", sa.String(length=100), nullable=True),
        sa.Column("strength_bench", sa.Float(), nullable=True),
        sa.Column("strength_squat", sa.Float(), nullable=True),
        sa.Column("strength_deadlift", sa.Float(), nullable=True),
        sa.Column("sleep_hours", sa.Float(), nullable=True),
        sa.Column("water_intake", sa.Float(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_progress_logs"),
    )
    op.create_index("ix_progress_logs_user_created", "progress_logs", ["user_id", "created_at"])

    # user_goals: target snapshots, most recent wins
    op.create_table(
        "user_goals",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.String(length=64), nullable=False),
        sa.Column("target_weight", sa.Float(), nullable=True),
        sa.Column("target_body_fat", sa.Float(), nullable=True),
        sa.Column("weekly_workout_target", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_user_goals"),
    )
    op.create_index("ix_user_goals_user_created", "user_goals", ["user_id", "created_at"])


def downgrade() -> None:
    op.drop_index("ix_user_goals_user_created", table_name="user_goals")
    op.drop_table("user_goals")
    op.drop_index("ix_progress_logs_user_created", table_name="progress_logs")
    op.drop_table("progress_logs")
