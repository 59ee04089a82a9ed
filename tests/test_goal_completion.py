"""Tests for goal completion percent and get-or-create goals."""

from datetime import timezone

import pytest

from app.models.user_goal import UserGoal
from app.services.goal_completion import (
    first_and_last_weight_logs,
    get_or_create_goals,
    goal_completion_percent,
)
from app.services.progress import get_progress_with_meta


async def _view_percent(store, now):
    view = await get_progress_with_meta(store, "u1", now=now, tz=timezone.utc)
    return view.goal_completion_percent


def _goal(target_weight):
    return UserGoal(id=1, user_id="u1", target_weight=target_weight)


def test_halfway_to_target(make_log):
    start, current = make_log(20, weight=80.0), make_log(0, weight=75.0)
    assert goal_completion_percent(_goal(70), start, current) == 50.0


@pytest.mark.parametrize("current", [60.0, 80.0, 100.0])
def test_start_at_target_is_complete(make_log, current):
    start = make_log(10, weight=70.004)
    assert goal_completion_percent(_goal(70), start, make_log(0, weight=current)) == 100.0


def test_clamped_to_range(make_log):
    start = make_log(10, weight=80.0)
    assert goal_completion_percent(_goal(70), start, make_log(0, weight=65.0)) == 100.0
    assert goal_completion_percent(_goal(70), start, make_log(0, weight=85.0)) == 0.0


def test_weight_gain_goal(make_log):
    start, current = make_log(10, weight=60.0), make_log(0, weight=63.0)
    assert goal_completion_percent(_goal(70), start, current) == 30.0


def test_rounded_to_one_decimal(make_log):
    start, current = make_log(10, weight=80.0), make_log(0, weight=77.0)
    assert goal_completion_percent(_goal(71), start, current) == 33.3


def test_exact_half_rounds_up(make_log):
    # 0.5 of a 40 kg journey is 1.25%
    start, current = make_log(10, weight=80.0), make_log(0, weight=79.5)
    assert goal_completion_percent(_goal(40), start, current) == 1.3


def test_missing_inputs_give_none(make_log):
    log = make_log(0, weight=80.0)
    assert goal_completion_percent(None, log, log) is None
    assert goal_completion_percent(_goal(None), log, log) is None
    assert goal_completion_percent(_goal(70), None, None) is None


def test_first_and_last_weight_logs_skip_weightless_entries(make_log):
    logs = [
        make_log(5),
        make_log(4, weight=81.0),
        make_log(2, weight=79.0),
        make_log(0, sleep_hours=7.0),
    ]
    first, last = first_and_last_weight_logs(logs)
    assert (first.weight, last.weight) == (81.0, 79.0)
    assert first_and_last_weight_logs([make_log(0)]) == (None, None)


async def test_start_weight_predates_goal(store, now):
    # Start is the earliest weight ever logged, not the first after the goal
    store.seed_log("u1", now.replace(month=1), weight=90.0)
    store.seed_log("u1", now.replace(month=2), weight=85.0)
    store.seed_goal("u1", created_at=now.replace(month=2, day=20), target_weight=80.0)
    store.seed_log("u1", now, weight=84.0)
    assert await _view_percent(store, now) == 60.0


async def test_most_recent_goal_wins(store, now):
    store.seed_log("u1", now.replace(month=1), weight=80.0)
    store.seed_log("u1", now, weight=75.0)
    store.seed_goal("u1", created_at=now.replace(month=1), target_weight=60.0)
    store.seed_goal("u1", created_at=now.replace(month=2), target_weight=70.0)
    assert await _view_percent(store, now) == 50.0


async def test_no_goal_or_no_weights(store, now):
    assert await _view_percent(store, now) is None
    store.seed_goal("u1", target_weight=70.0)
    store.seed_log("u1", now, workout_completed=True)
    assert await _view_percent(store, now) is None


async def test_get_or_create_goals_inserts_once(store):
    created = await get_or_create_goals(store, "u1", {"target_weight": 72.5, "weekly_workout_target": 4})
    assert created.target_weight == 72.5
    assert created.target_body_fat is None
    assert created.weekly_workout_target == 4

    again = await get_or_create_goals(store, "u1", {"target_weight": 50})
    assert again.id == created.id
    assert again.target_weight == 72.5


async def test_get_or_create_goals_without_defaults(store):
    goal = await get_or_create_goals(store, "u2")
    assert (goal.target_weight, goal.target_body_fat, goal.weekly_workout_target) == (None, None, None)
