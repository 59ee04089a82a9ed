"""Goal completion: progress from the first recorded weight toward the current target weight."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Optional

from app.core.constants import GOAL_EPSILON
from app.db.progress_store import ProgressLogStore
from app.models.progress_log import ProgressLog
from app.models.user_goal import UserGoal
from app.services.rounding import round_half_up


def first_and_last_weight_logs(
    logs: Sequence[ProgressLog],
) -> tuple[Optional[ProgressLog], Optional[ProgressLog]]:
    """Earliest and latest weight-bearing logs of an ascending history."""
    with_weight = [log for log in logs if log.weight is not None]
    if not with_weight:
        return None, None
    return with_weight[0], with_weight[-1]


def goal_completion_percent(
    goal: Optional[UserGoal],
    earliest_weight_log: Optional[ProgressLog],
    latest_weight_log: Optional[ProgressLog],
) -> Optional[float]:
    """
    Percent of the way from start weight to target: (start - current) / (start - target) * 100.

    Start is the earliest logged weight regardless of when the goal was set.
    Clamped to [0, 100] and rounded to one decimal. A start already within
    GOAL_EPSILON of target is complete (100). None when any input is missing.
    """
    if goal is None or goal.target_weight is None:
        return None
    if earliest_weight_log is None or latest_weight_log is None:
        return None
    if earliest_weight_log.weight is None or latest_weight_log.weight is None:
        return None

    start = float(earliest_weight_log.weight)
    current = float(latest_weight_log.weight)
    target = float(goal.target_weight)

    denom = start - target
    if abs(denom) < GOAL_EPSILON:
        return 100.0
    pct = (start - current) / denom * 100
    return float(round_half_up(min(100.0, max(0.0, pct)), 1))


async def get_or_create_goals(
    store: ProgressLogStore,
    user_id: str,
    defaults: Optional[dict[str, Any]] = None,
) -> UserGoal:
    """Return the most recent goal row, inserting one from defaults if the user has none."""
    goal = await store.query_goal(user_id)
    if goal is None:
        goal = await store.insert_goal(user_id, defaults or {})
    return goal
