"""Fitness activity scheduling and timeline tracking."""

import logging

from .config import config
from .exceptions import (
    ActivityError,
    FitnessError,
    NotFoundError,
    OrderingError,
    OverlapError,
    UserError,
    ValidationError,
)
from .activity import Activity, ActivityKind, ActivitySet, build_activity
from .schedule import TrainingPlan, UserLedger, overlaps
from .users import FitnessTracker, User, UserLevel

logging.getLogger(__name__).setLevel(config.LOG_LEVEL.upper())

__all__ = [
    "Activity",
    "ActivityError",
    "ActivityKind",
    "ActivitySet",
    "FitnessError",
    "FitnessTracker",
    "NotFoundError",
    "OrderingError",
    "OverlapError",
    "TrainingPlan",
    "User",
    "UserError",
    "UserLedger",
    "UserLevel",
    "ValidationError",
    "build_activity",
    "overlaps",
]
