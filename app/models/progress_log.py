"""ProgressLog model: one immutable self-reported daily entry."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Float, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class ProgressLog(Base):
    """A single health/workout log entry.

    Append-only: rows are never updated or deleted here. Several entries may
    share a calendar day; created_at is either the client's log_date or server time.
    """

    __tablename__ = "progress_logs"
    __table_args__ = (
        Index("ix_progress_logs_user_created", "user_id", "created_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String(64), nullable=False)

    weight: Mapped[float | None] = mapped_column(Float, nullable=True)
    body_fat: Mapped[float | None] = mapped_column(Float, nullable=True)
    calories_intake: Mapped[int | None] = mapped_column(Integer, nullable=True)
    protein_intake: Mapped[int | None] = mapped_column(Integer, nullable=True)

    workout_completed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    workout_type: Mapped[str | None] = mapped_column(String(100), nullable=True)

    # Lifts in the user's unit (kg/lb), one working weight per lift
    strength_bench: Mapped[float | None] = mapped_column(Float, nullable=True)
    strength_squat: Mapped[float | None] = mapped_column(Float, nullable=True)
    strength_deadlift: Mapped[float | None] = mapped_column(Float, nullable=True)

    sleep_hours: Mapped[float | None] = mapped_column(Float, nullable=True)
    water_intake: Mapped[float | None] = mapped_column(Float, nullable=True)  # litres

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
