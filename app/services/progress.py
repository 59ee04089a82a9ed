"""Progress aggregation: the write path plus the user and admin views.

Every view is recomputed from stored history on each call; nothing is cached.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from datetime import datetime, timedelta, tzinfo
from typing import Any, Optional

from app.core.constants import PROGRESS_LOG_LIMIT, TRAILING_WINDOW_DAYS
from app.core.enums import SortDirection
from app.db.progress_store import ProgressLogStore
from app.models.progress_log import ProgressLog
from app.schemas.progress import (
    AdminUserProgress,
    ProgressLogRead,
    ProgressWithMeta,
    StreakSummary,
)
from app.services.dates import as_utc, parse_log_date, resolve_tz, utc_now
from app.services.goal_completion import first_and_last_weight_logs, goal_completion_percent
from app.services.insights import consistency_percent, get_insights, strength_growth_percent
from app.services.rounding import format_fixed
from app.services.streak import current_streak, last_workout_date, longest_streak

logger = logging.getLogger(__name__)

FLOAT_FIELDS = (
    "weight",
    "body_fat",
    "strength_bench",
    "strength_squat",
    "strength_deadlift",
    "sleep_hours",
    "water_intake",
)
INT_FIELDS = ("calories_intake", "protein_intake")


# ── Coercion ─────────────────────────────────────────────────────────────

def to_float(value: Any) -> Optional[float]:
    """Parse a numeric input; None for absent, unparseable or non-finite values."""
    if value is None or isinstance(value, bool):
        return None
    try:
        f = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return None
    return f if math.isfinite(f) else None


def to_int(value: Any) -> Optional[int]:
    """Parse an integer input, truncating fractional values ("2200.7" -> 2200)."""
    f = to_float(value)
    return int(f) if f is not None else None


def coerce_progress_fields(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Turn raw request fields into ProgressLog column values (created_at only if log_date parses)."""
    fields: dict[str, Any] = {name: to_float(raw.get(name)) for name in FLOAT_FIELDS}
    fields.update({name: to_int(raw.get(name)) for name in INT_FIELDS})
    fields["workout_completed"] = bool(raw.get("workout_completed"))
    fields["workout_type"] = raw.get("workout_type") or None

    log_date = raw.get("log_date")
    created_at = parse_log_date(log_date)
    if created_at is not None:
        fields["created_at"] = created_at
    elif log_date not in (None, ""):
        logger.debug("Unparseable log_date %r; using server time", log_date)
    return fields


# ── Write path ───────────────────────────────────────────────────────────

async def insert_progress(store: ProgressLogStore, user_id: str, raw: Mapping[str, Any]) -> ProgressLog:
    """Append one log for user_id. The only mutation the analytics core performs."""
    return await store.insert(user_id, coerce_progress_fields(raw))


# ── Helpers ──────────────────────────────────────────────────────────────

def _mean(values: Sequence[float]) -> Optional[float]:
    return sum(values) / len(values) if values else None


def weight_change_percent(
    logs: Sequence[ProgressLog],
    now: datetime,
    window_days: int = TRAILING_WINDOW_DAYS,
) -> Optional[float]:
    """
    Change from the last weight on/before (now - window_days) to the latest weight.

    Requires at least one log inside the trailing window. None when either weight
    is missing or the past weight is 0.
    """
    cutoff = as_utc(now) - timedelta(days=window_days)
    if not any(as_utc(log.created_at) >= cutoff for log in logs):
        return None
    _, latest = first_and_last_weight_logs(logs)
    past = [log for log in logs if log.weight is not None and as_utc(log.created_at) <= cutoff]
    if latest is None or not past:
        return None
    current = float(latest.weight)
    previous = float(past[-1].weight)
    if previous == 0:
        return None
    return (current - previous) / previous * 100


# ── Views ────────────────────────────────────────────────────────────────

async def get_progress_with_meta(
    store: ProgressLogStore,
    user_id: str,
    *,
    now: datetime | None = None,
    tz: tzinfo | None = None,
) -> ProgressWithMeta:
    """User view: latest PROGRESS_LOG_LIMIT logs (newest first), streak, goal %, insights."""
    now = now or utc_now()
    recent = await store.query_logs(user_id, SortDirection.DESC, limit=PROGRESS_LOG_LIMIT)
    history = await store.query_logs(user_id, SortDirection.ASC)
    goal = await store.query_goal(user_id)

    return ProgressWithMeta(
        logs=[ProgressLogRead.model_validate(log) for log in recent],
        streak=current_streak(history, now=now, tz=tz),
        goal_completion_percent=goal_completion_percent(goal, *first_and_last_weight_logs(history)),
        insights=get_insights(history),
    )


async def get_admin_user_progress(
    store: ProgressLogStore,
    user_id: str,
    *,
    now: datetime | None = None,
    tz: tzinfo | None = None,
) -> AdminUserProgress:
    """Admin view: full ascending history plus trailing-window and summary statistics."""
    now = now or utc_now()
    logs = await store.query_logs(user_id, SortDirection.ASC)
    goal = await store.query_goal(user_id)

    _, latest_weight_log = first_and_last_weight_logs(logs)
    current_weight = float(latest_weight_log.weight) if latest_weight_log is not None else None

    weight_change = weight_change_percent(logs, now)
    strength_growth = strength_growth_percent(logs)
    consistency = consistency_percent(logs)

    calories = [float(log.calories_intake) for log in logs if log.calories_intake is not None]
    sleep = [float(log.sleep_hours) for log in logs if log.sleep_hours is not None]
    avg_calories = _mean(calories)
    avg_sleep = _mean(sleep)

    return AdminUserProgress(
        current_weight=current_weight,
        weight_change_percent=format_fixed(weight_change, 1) if weight_change is not None else None,
        strength_growth_percent=format_fixed(strength_growth, 1) if strength_growth is not None else None,
        workout_consistency_percent=format_fixed(consistency, 1) if consistency is not None else 0,
        active_streak=current_streak(logs, now=now, tz=tz),
        goal_completion_percent=goal_completion_percent(goal, *first_and_last_weight_logs(logs)),
        average_calories=format_fixed(avg_calories, 0) if avg_calories is not None else None,
        average_sleep=format_fixed(avg_sleep, 1) if avg_sleep is not None else None,
        insights=get_insights(logs),
        logs=[ProgressLogRead.model_validate(log) for log in logs],
    )


async def get_streak_summary(
    store: ProgressLogStore,
    user_id: str,
    *,
    now: datetime | None = None,
    tz: tzinfo | None = None,
) -> StreakSummary:
    """Current and longest completed-workout streaks plus the last completed day."""
    tz = resolve_tz(tz)
    logs = await store.query_logs(user_id, SortDirection.ASC)
    return StreakSummary(
        current_streak=current_streak(logs, now=now, tz=tz),
        longest_streak=longest_streak(logs, tz=tz),
        last_workout_date=last_workout_date(logs, tz=tz),
    )
