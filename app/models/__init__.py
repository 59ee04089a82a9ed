"""ORM models - import all so Base.metadata is complete for migrations."""

from app.models.progress_log import ProgressLog
from app.models.user_goal import UserGoal

__all__ = [
    "ProgressLog",
    "UserGoal",
]
