"""Shared fixtures: a fixed clock, the fake store and a log factory."""

from datetime import datetime, timedelta, timezone

import pytest

from app.models.progress_log import ProgressLog
from tests.fakes import LOG_DEFAULTS, FakeProgressLogStore

NOW = datetime(2026, 3, 15, 18, 30, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def store():
    return FakeProgressLogStore()


@pytest.fixture
def make_log():
    """Build a detached ProgressLog `days_ago` days before NOW (same time of day)."""
    counter = {"id": 0}

    def _make(days_ago: float = 0, **fields) -> ProgressLog:
        counter["id"] += 1
        return ProgressLog(
            id=counter["id"],
            user_id="u1",
            created_at=NOW - timedelta(days=days_ago),
            **{**LOG_DEFAULTS, **fields},
        )

    return _make
