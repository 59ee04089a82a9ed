"""Progress analytics Pydantic schemas: log write/read, goals, user and admin views."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ── ProgressLog ──────────────────────────────────────────────────────────

class ProgressLogCreate(BaseModel):
    """Raw daily log, passed through untouched; coercion happens in the write path.

    Numeric fields may arrive as numbers or strings. Anything else (booleans,
    garbage text, non-finite values) is stored as null.
    """

    log_date: Any = Field(
        None, description="YYYY-MM-DD or ISO-8601 datetime. Omit (or send garbage) for server time."
    )
    weight: Any = None
    body_fat: Any = None
    calories_intake: Any = None
    protein_intake: Any = None
    workout_completed: Optional[bool] = False
    workout_type: Optional[str] = Field(None, max_length=100)
    strength_bench: Any = None
    strength_squat: Any = None
    strength_deadlift: Any = None
    sleep_hours: Any = None
    water_intake: Any = None


class ProgressLogRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    weight: Optional[float] = None
    body_fat: Optional[float] = None
    calories_intake: Optional[int] = None
    protein_intake: Optional[int] = None
    workout_completed: bool = False
    workout_type: Optional[str] = None
    strength_bench: Optional[float] = None
    strength_squat: Optional[float] = None
    strength_deadlift: Optional[float] = None
    sleep_hours: Optional[float] = None
    water_intake: Optional[float] = None
    created_at: datetime


class ProgressSaved(BaseModel):
    success: bool = True
    message: str = "Progress saved for this date"


# ── UserGoal ─────────────────────────────────────────────────────────────

class UserGoalCreate(BaseModel):
    target_weight: Optional[float] = Field(None, gt=0)
    target_body_fat: Optional[float] = Field(None, ge=0, le=100)
    weekly_workout_target: Optional[int] = Field(None, ge=0, le=14)


class UserGoalRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    target_weight: Optional[float] = None
    target_body_fat: Optional[float] = None
    weekly_workout_target: Optional[int] = None
    created_at: datetime


# ── Views ────────────────────────────────────────────────────────────────

class _CamelModel(BaseModel):
    """Serialized with camelCase keys (goalCompletionPercent, ...) for the frontend."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProgressWithMeta(_CamelModel):
    logs: list[ProgressLogRead] = []
    streak: int = 0
    goal_completion_percent: Optional[float] = None
    insights: list[str] = []


class AdminUserProgress(_CamelModel):
    """Admin rollup. Percentages and averages are pre-formatted strings.

    workout_consistency_percent is the integer 0 when the user has no logs.
    """

    current_weight: Optional[float] = None
    weight_change_percent: Optional[str] = None
    strength_growth_percent: Optional[str] = None
    workout_consistency_percent: Union[str, int] = 0
    active_streak: int = 0
    goal_completion_percent: Optional[float] = None
    average_calories: Optional[str] = None
    average_sleep: Optional[str] = None
    insights: list[str] = []
    logs: list[ProgressLogRead] = []


class StreakSummary(BaseModel):
    current_streak: int = 0
    longest_streak: int = 0
    last_workout_date: Optional[date] = None
