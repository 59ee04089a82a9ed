"""Shared enums for models and API."""

from enum import Enum


class Insight(str, Enum):
    """Heuristic labels emitted by the insight engine, in emission order."""

    CONSISTENCY_NEEDS_IMPROVEMENT = "Consistency Needs Improvement"
    WEIGHT_PLATEAU = "Weight Plateau Detected"
    STRENGTH_MILESTONE = "Strength Milestone Achieved"


class SortDirection(str, Enum):
    """Ordering of a log read by created_at."""

    ASC = "asc"
    DESC = "desc"
