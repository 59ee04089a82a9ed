"""Progress log store: the append-only read/write contract used by the analytics services.

`ProgressLogStore` is the port; `SqlAlchemyProgressLogStore` implements it over
an AsyncSession. Reads are ordered by created_at, ties broken by insertion id.
"""

from __future__ import annotations

from typing import Any, Protocol

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.enums import SortDirection
from app.db.session import get_db
from app.models.progress_log import ProgressLog
from app.models.user_goal import UserGoal
from app.services.dates import as_utc

GOAL_FIELDS = ("target_weight", "target_body_fat", "weekly_workout_target")


class ProgressLogStore(Protocol):
    async def insert(self, user_id: str, fields: dict[str, Any]) -> ProgressLog: ...

    async def query_logs(
        self,
        user_id: str,
        direction: SortDirection = SortDirection.ASC,
        limit: int | None = None,
    ) -> list[ProgressLog]: ...

    async def query_goal(self, user_id: str) -> UserGoal | None: ...

    async def insert_goal(self, user_id: str, defaults: dict[str, Any]) -> UserGoal: ...


class SqlAlchemyProgressLogStore:
    """ProgressLogStore backed by the progress_logs / user_goals tables.

    Writes are flushed, not committed: the request-scoped session from get_db
    commits after the endpoint returns.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def insert(self, user_id: str, fields: dict[str, Any]) -> ProgressLog:
        values = dict(fields)
        created_at = values.pop("created_at", None)
        log = ProgressLog(user_id=user_id, **values)
        if created_at is not None:
            log.created_at = as_utc(created_at)
        self._session.add(log)
        await self._session.flush()
        await self._session.refresh(log)
        return log

    async def query_logs(
        self,
        user_id: str,
        direction: SortDirection = SortDirection.ASC,
        limit: int | None = None,
    ) -> list[ProgressLog]:
        stmt = select(ProgressLog).where(ProgressLog.user_id == user_id)
        if direction == SortDirection.DESC:
            stmt = stmt.order_by(ProgressLog.created_at.desc(), ProgressLog.id.desc())
        else:
            stmt = stmt.order_by(ProgressLog.created_at.asc(), ProgressLog.id.asc())
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def query_goal(self, user_id: str) -> UserGoal | None:
        result = await self._session.execute(
            select(UserGoal)
            .where(UserGoal.user_id == user_id)
            .order_by(UserGoal.created_at.desc(), UserGoal.id.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def insert_goal(self, user_id: str, defaults: dict[str, Any]) -> UserGoal:
        goal = UserGoal(user_id=user_id, **{k: defaults.get(k) for k in GOAL_FIELDS})
        self._session.add(goal)
        await self._session.flush()
        await self._session.refresh(goal)
        return goal


async def get_progress_store(db: AsyncSession = Depends(get_db)) -> ProgressLogStore:
    """Dependency that yields a store bound to the request's DB session."""
    return SqlAlchemyProgressLogStore(db)
