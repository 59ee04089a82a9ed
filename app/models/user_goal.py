"""UserGoal model: target snapshots; the most recently created row wins."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class UserGoal(Base):
    """A user's weight / body fat / weekly workout targets at one point in time."""

    __tablename__ = "user_goals"
    __table_args__ = (
        Index("ix_user_goals_user_created", "user_id", "created_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String(64), nullable=False)
    target_weight: Mapped[float | None] = mapped_column(Float, nullable=True)
    target_body_fat: Mapped[float | None] = mapped_column(Float, nullable=True)
    weekly_workout_target: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
