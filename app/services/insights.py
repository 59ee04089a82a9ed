"""Rule-based insights over a user's full progress history."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from app.core.constants import (
    CONSISTENCY_THRESHOLD_PCT,
    PLATEAU_TOLERANCE,
    PLATEAU_WINDOW,
    STRENGTH_LIFT_DIVISOR,
    STRENGTH_MILESTONE_PCT,
)
from app.core.enums import Insight
from app.models.progress_log import ProgressLog


def has_strength(log: ProgressLog) -> bool:
    return (
        log.strength_bench is not None
        or log.strength_squat is not None
        or log.strength_deadlift is not None
    )


def strength_average(log: ProgressLog) -> float:
    """Sum of recorded lifts over a fixed divisor of 3, even when fewer lifts are recorded."""
    lifts = (log.strength_bench, log.strength_squat, log.strength_deadlift)
    return sum(float(v) for v in lifts if v) / STRENGTH_LIFT_DIVISOR


def strength_growth_percent(logs: Sequence[ProgressLog]) -> Optional[float]:
    """Unrounded growth from the first to the last lift-bearing log (ascending history).

    None with fewer than two lift-bearing logs or a non-positive starting average.
    """
    with_strength = [log for log in logs if has_strength(log)]
    if len(with_strength) < 2:
        return None
    first_avg = strength_average(with_strength[0])
    last_avg = strength_average(with_strength[-1])
    if first_avg <= 0:
        return None
    return (last_avg - first_avg) / first_avg * 100


def consistency_percent(logs: Sequence[ProgressLog]) -> Optional[float]:
    if not logs:
        return None
    completed = sum(1 for log in logs if log.workout_completed)
    return completed / len(logs) * 100


def is_weight_plateau(logs: Sequence[ProgressLog]) -> bool:
    """Last PLATEAU_WINDOW recorded weights all sit within PLATEAU_TOLERANCE of their mean."""
    weights = [float(log.weight) for log in logs if log.weight is not None]
    if len(weights) < PLATEAU_WINDOW:
        return False
    window = weights[-PLATEAU_WINDOW:]
    mean = sum(window) / len(window)
    return all(abs(w - mean) < PLATEAU_TOLERANCE for w in window)


def get_insights(logs: Sequence[ProgressLog]) -> list[str]:
    """
    Evaluate each rule independently over logs ordered ascending by created_at.

    Returns labels in Insight order. Empty history yields no labels at all.
    """
    if not logs:
        return []

    insights: list[str] = []

    consistency = consistency_percent(logs)
    if consistency is not None and consistency < CONSISTENCY_THRESHOLD_PCT:
        insights.append(Insight.CONSISTENCY_NEEDS_IMPROVEMENT.value)

    if is_weight_plateau(logs):
        insights.append(Insight.WEIGHT_PLATEAU.value)

    with_strength = [log for log in logs if has_strength(log)]
    if len(with_strength) >= 2:
        first_avg = strength_average(with_strength[0])
        last_avg = strength_average(with_strength[-1])
        # Milestone needs both ends positive; growth alone only needs the start
        if first_avg > 0 and last_avg > 0:
            growth = (last_avg - first_avg) / first_avg * 100
            if growth > STRENGTH_MILESTONE_PCT:
                insights.append(Insight.STRENGTH_MILESTONE.value)

    return insights
