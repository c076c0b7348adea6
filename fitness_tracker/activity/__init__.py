"""Activity value model, calorie formulas and construction helpers."""

from .models import (
    Activity,
    ActivityKind,
    AltimetryDistance,
    Distance,
    Repetitions,
    WeightedRepetitions,
    diamond_push_up,
    mountain_run,
    push_up,
    track_run,
    weight_lifting,
)
from .calories import count_calories
from .collection import ActivitySet
from .factory import build_activity

__all__ = [
    "Activity",
    "ActivityKind",
    "ActivitySet",
    "AltimetryDistance",
    "Distance",
    "Repetitions",
    "WeightedRepetitions",
    "build_activity",
    "count_calories",
    "diamond_push_up",
    "mountain_run",
    "push_up",
    "track_run",
    "weight_lifting",
]
