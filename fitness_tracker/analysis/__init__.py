"""Analysis module for aggregation queries over users."""

from .queries import (
    DistanceQuery,
    HardestTrainingPlanQuery,
    MostActivitiesQuery,
    MostCaloriesQuery,
    MostCommonActivityQuery,
    UserQuery,
)

__all__ = [
    "DistanceQuery",
    "HardestTrainingPlanQuery",
    "MostActivitiesQuery",
    "MostCaloriesQuery",
    "MostCommonActivityQuery",
    "UserQuery",
]
