"""Workout streaks over day-bucketed progress logs."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime, timedelta, tzinfo

from app.models.progress_log import ProgressLog
from app.services.dates import local_date, resolve_tz, utc_now


def bucket_by_day(logs: Iterable[ProgressLog], tz: tzinfo) -> dict[date, bool]:
    """Map each logged calendar day to True if any log that day completed a workout.

    A day with logs but no completed workout maps to False (present, not missing).
    """
    buckets: dict[date, bool] = {}
    for log in logs:
        if log.created_at is None:
            continue
        d = local_date(log.created_at, tz)
        buckets[d] = buckets.get(d, False) or bool(log.workout_completed)
    return buckets


def current_streak(
    logs: Iterable[ProgressLog],
    now: datetime | None = None,
    tz: tzinfo | None = None,
) -> int:
    """
    Consecutive completed-workout days ending today or yesterday.

    Input order does not matter. The walk starts at the most recent logged day and
    stops at the first day without a completed workout, or at a gap of more than one
    day. A run whose latest day is older than yesterday is not live and counts 0.
    """
    tz = resolve_tz(tz)
    today = local_date(now or utc_now(), tz)
    buckets = bucket_by_day(logs, tz)

    streak = 0
    previous: date | None = None
    for d in sorted(buckets, reverse=True):
        if not buckets[d]:
            break
        gap = (today - d).days if previous is None else (previous - d).days
        if gap > 1:
            break
        streak += 1
        previous = d
    return streak


def longest_streak(logs: Iterable[ProgressLog], tz: tzinfo | None = None) -> int:
    """Longest run of consecutive completed-workout days anywhere in the history."""
    tz = resolve_tz(tz)
    days = sorted(d for d, completed in bucket_by_day(logs, tz).items() if completed)
    longest = 0
    run = 0
    previous: date | None = None
    for d in days:
        run = run + 1 if previous is not None and d - previous == timedelta(days=1) else 1
        longest = max(longest, run)
        previous = d
    return longest


def last_workout_date(logs: Iterable[ProgressLog], tz: tzinfo | None = None) -> date | None:
    tz = resolve_tz(tz)
    days = [d for d, completed in bucket_by_day(logs, tz).items() if completed]
    return max(days) if days else None
