"""Admin progress rollup for a single user."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError

from app.db.progress_store import ProgressLogStore, get_progress_store
from app.schemas.progress import AdminUserProgress
from app.services.progress import get_admin_user_progress

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/user-progress/{user_id}", response_model=AdminUserProgress)
async def get_user_progress(user_id: str, store: ProgressLogStore = Depends(get_progress_store)):
    """Full history (oldest first) with weight change, strength growth, consistency and averages."""
    try:
        return await get_admin_user_progress(store, user_id)
    except SQLAlchemyError as e:
        logger.exception("GET /admin/user-progress/%s failed: %s", user_id, e)
        raise HTTPException(status_code=500, detail="Failed to load progress")
