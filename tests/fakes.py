"""In-memory ProgressLogStore for fast, isolated tests. No database required."""

from __future__ import annotations

from collections import defaultdict
from datetime import datetime, timezone
from typing import Any, Optional

from app.core.enums import SortDirection
from app.db.progress_store import GOAL_FIELDS
from app.models.progress_log import ProgressLog
from app.models.user_goal import UserGoal
from app.services.dates import as_utc

LOG_DEFAULTS: dict[str, Any] = {
    "weight": None,
    "body_fat": None,
    "calories_intake": None,
    "protein_intake": None,
    "workout_completed": False,
    "workout_type": None,
    "strength_bench": None,
    "strength_squat": None,
    "strength_deadlift": None,
    "sleep_hours": None,
    "water_intake": None,
}


class FakeProgressLogStore:
    """Same contract as SqlAlchemyProgressLogStore, backed by dicts of ORM objects."""

    def __init__(self):
        self._logs: dict[str, list[ProgressLog]] = defaultdict(list)
        self._goals: dict[str, list[UserGoal]] = defaultdict(list)
        self._next_id = 1
        self.insert_calls = 0

    def _id(self) -> int:
        value = self._next_id
        self._next_id += 1
        return value

    def reset(self) -> None:
        self._logs.clear()
        self._goals.clear()

    def seed_log(self, user_id: str, created_at: datetime, **fields: Any) -> ProgressLog:
        log = ProgressLog(
            id=self._id(),
            user_id=user_id,
            created_at=created_at,
            **{**LOG_DEFAULTS, **fields},
        )
        self._logs[user_id].append(log)
        return log

    def seed_goal(self, user_id: str, created_at: Optional[datetime] = None, **fields: Any) -> UserGoal:
        goal = UserGoal(
            id=self._id(),
            user_id=user_id,
            created_at=created_at or datetime.now(timezone.utc),
            **{k: fields.get(k) for k in GOAL_FIELDS},
        )
        self._goals[user_id].append(goal)
        return goal

    async def insert(self, user_id: str, fields: dict[str, Any]) -> ProgressLog:
        self.insert_calls += 1
        values = dict(fields)
        created_at = values.pop("created_at", None) or datetime.now(timezone.utc)
        return self.seed_log(user_id, created_at, **values)

    async def query_logs(
        self,
        user_id: str,
        direction: SortDirection = SortDirection.ASC,
        limit: Optional[int] = None,
    ) -> list[ProgressLog]:
        logs = sorted(
            self._logs.get(user_id, []),
            key=lambda log: (as_utc(log.created_at), log.id),
            reverse=direction == SortDirection.DESC,
        )
        return logs[:limit] if limit is not None else logs

    async def query_goal(self, user_id: str) -> Optional[UserGoal]:
        goals = sorted(self._goals.get(user_id, []), key=lambda g: (as_utc(g.created_at), g.id))
        return goals[-1] if goals else None

    async def insert_goal(self, user_id: str, defaults: dict[str, Any]) -> UserGoal:
        return self.seed_goal(user_id, **defaults)
