"""Tests for the rule-based insight engine."""

import pytest

from app.core.enums import Insight
from app.services.insights import (
    consistency_percent,
    get_insights,
    is_weight_plateau,
    strength_average,
    strength_growth_percent,
)

CONSISTENCY = Insight.CONSISTENCY_NEEDS_IMPROVEMENT.value
PLATEAU = Insight.WEIGHT_PLATEAU.value
MILESTONE = Insight.STRENGTH_MILESTONE.value


def test_no_logs_no_insights():
    assert get_insights([]) == []


def test_consistency_below_sixty_percent(make_log):
    logs = [make_log(d, workout_completed=d < 5) for d in range(10)]  # 50%
    assert get_insights(logs) == [CONSISTENCY]


def test_consistency_at_sixty_percent_is_fine(make_log):
    logs = [make_log(d, workout_completed=d < 6) for d in range(10)]
    assert consistency_percent(logs) == pytest.approx(60.0)
    assert CONSISTENCY not in get_insights(logs)


def test_plateau_with_one_outlier_inside_tolerance(make_log):
    logs = [make_log(20 - d, weight=80.0, workout_completed=True) for d in range(13)]
    logs.append(make_log(0, weight=80.3, workout_completed=True))
    assert get_insights(logs) == [PLATEAU]


def test_plateau_needs_fourteen_weights(make_log):
    logs = [make_log(d, weight=80.0, workout_completed=True) for d in range(13)]
    logs += [make_log(d, sleep_hours=7.0, workout_completed=True) for d in range(13, 20)]
    assert not is_weight_plateau(logs)
    assert PLATEAU not in get_insights(logs)


def test_plateau_uses_only_last_fourteen_weights(make_log):
    # Early swings are outside the window
    logs = [make_log(40 - d, weight=90.0 - d) for d in range(5)]
    logs += [make_log(14 - d, weight=80.0 + (d % 2) * 0.4) for d in range(14)]
    assert is_weight_plateau(logs)


def test_no_plateau_when_any_value_strays(make_log):
    logs = [make_log(14 - d, weight=80.0) for d in range(13)]
    logs.append(make_log(0, weight=81.0))
    assert not is_weight_plateau(logs)


def test_strength_milestone(make_log):
    logs = [
        make_log(30, strength_bench=100, strength_squat=80, strength_deadlift=120, workout_completed=True),
        make_log(15, weight=80.0, workout_completed=True),
        make_log(0, strength_bench=115, strength_squat=115, strength_deadlift=115, workout_completed=True),
    ]
    assert strength_growth_percent(logs) == pytest.approx(15.0)
    assert get_insights(logs) == [MILESTONE]


def test_small_strength_growth_does_not_fire(make_log):
    logs = [
        make_log(10, strength_bench=100, strength_squat=100, strength_deadlift=100, workout_completed=True),
        make_log(0, strength_bench=105, strength_squat=105, strength_deadlift=105, workout_completed=True),
    ]
    assert MILESTONE not in get_insights(logs)


def test_strength_average_always_divides_by_three(make_log):
    assert strength_average(make_log(strength_bench=90)) == 30.0
    assert strength_average(make_log(strength_bench=90, strength_squat=0)) == 30.0


def test_partial_lifts_can_trigger_milestone(make_log):
    # bench only (avg 100/3) -> all three lifts (avg 100): growth from the fixed divisor
    logs = [
        make_log(10, strength_bench=100, workout_completed=True),
        make_log(0, strength_bench=100, strength_squat=100, strength_deadlift=100, workout_completed=True),
    ]
    assert MILESTONE in get_insights(logs)


def test_single_strength_log_is_not_enough(make_log):
    logs = [make_log(0, strength_bench=100, workout_completed=True)]
    assert strength_growth_percent(logs) is None
    assert get_insights(logs) == []


def test_zero_last_average_suppresses_milestone(make_log):
    logs = [
        make_log(10, strength_bench=100, workout_completed=True),
        make_log(0, strength_squat=0, workout_completed=True),
    ]
    assert MILESTONE not in get_insights(logs)
    assert strength_growth_percent(logs) == pytest.approx(-100.0)


def test_all_three_labels_in_fixed_order(make_log):
    logs = [make_log(30, strength_bench=50, strength_squat=50, strength_deadlift=50)]
    logs += [make_log(20 - d, weight=70.0) for d in range(14)]
    logs.append(make_log(0, strength_bench=80, strength_squat=80, strength_deadlift=80))
    assert get_insights(logs) == [CONSISTENCY, PLATEAU, MILESTONE]
