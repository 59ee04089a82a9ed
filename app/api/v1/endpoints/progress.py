"""User-facing progress endpoints: log a day, read the progress summary, streaks and goals.

The caller's identity arrives as the user_id path parameter; authentication
sits in front of this router.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError

from app.db.progress_store import ProgressLogStore, get_progress_store
from app.schemas.progress import (
    ProgressLogCreate,
    ProgressSaved,
    ProgressWithMeta,
    StreakSummary,
    UserGoalCreate,
    UserGoalRead,
)
from app.services.goal_completion import get_or_create_goals
from app.services.progress import get_progress_with_meta, get_streak_summary, insert_progress

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/{user_id}", response_model=ProgressSaved, status_code=201)
async def post_progress(
    user_id: str,
    payload: ProgressLogCreate,
    store: ProgressLogStore = Depends(get_progress_store),
):
    """Append one daily log. Unparseable numbers are stored as null; log_date defaults to now."""
    try:
        await insert_progress(store, user_id, payload.model_dump())
    except SQLAlchemyError as e:
        logger.exception("POST /progress/%s failed: %s", user_id, e)
        raise HTTPException(status_code=500, detail="Failed to save progress")
    return ProgressSaved()


@router.get("/{user_id}", response_model=ProgressWithMeta)
async def get_progress(user_id: str, store: ProgressLogStore = Depends(get_progress_store)):
    """Recent logs (newest first) with streak, goal completion and insights."""
    try:
        return await get_progress_with_meta(store, user_id)
    except SQLAlchemyError as e:
        logger.exception("GET /progress/%s failed: %s", user_id, e)
        raise HTTPException(status_code=500, detail="Failed to load progress")


@router.get("/{user_id}/streak", response_model=StreakSummary)
async def get_streak(user_id: str, store: ProgressLogStore = Depends(get_progress_store)):
    """
    Returns current workout streak (consecutive days with a completed workout),
    longest ever streak, and the last day a workout was completed.
    """
    return await get_streak_summary(store, user_id)


@router.get("/{user_id}/goals", response_model=UserGoalRead)
async def get_goals(user_id: str, store: ProgressLogStore = Depends(get_progress_store)):
    """Current goal snapshot; creates an empty one on first access."""
    return await get_or_create_goals(store, user_id)


@router.post("/{user_id}/goals", response_model=UserGoalRead, status_code=201)
async def set_goals(
    user_id: str,
    payload: UserGoalCreate,
    store: ProgressLogStore = Depends(get_progress_store),
):
    """Record a new goal snapshot. The newest snapshot is the one used for goal completion."""
    return await store.insert_goal(user_id, payload.model_dump())
