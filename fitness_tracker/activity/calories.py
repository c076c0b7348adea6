"""Calorie estimation for each kind of activity.

Every formula picks a Metabolic Equivalent of Task (MET) from a threshold
table, then scales it by the heart rate, a duration / distance / weight term
and the user's calorie multiplier. Results are in kcal.
"""

from typing import Callable, Dict, Sequence, Tuple

from .models import Activity, ActivityKind

# (inclusive upper bound, MET) pairs, checked in order; last entry catches the rest
PUSH_UP_METS: Sequence[Tuple[float, float]] = ((40, 3.8), (float("inf"), 7.5))
DIAMOND_PUSH_UP_METS: Sequence[Tuple[float, float]] = ((40, 4.5), (float("inf"), 9.0))
WEIGHT_LIFTING_METS: Sequence[Tuple[float, float]] = ((15, 3.5), (30, 5.0), (float("inf"), 6.0))

# Thresholds in km/h
TRACK_RUN_METS: Sequence[Tuple[float, float]] = (
    (6.7593, 6.5),
    (12.0701, 11.8),
    (15.4497, 14.8),
    (float("inf"), 18.0),  # High competition track racing
)
MOUNTAIN_RUN_METS: Sequence[Tuple[float, float]] = (
    (7.24, 10.3),
    (9.66, 13.3),
    (float("inf"), 15.5),
)


def select_met(value: float, table: Sequence[Tuple[float, float]]) -> float:
    """Get the MET of the first threshold ``value`` doesn't exceed."""
    for upper_bound, met in table:
        if value <= upper_bound:
            return met
    return table[-1][1]


def _hours(activity: Activity) -> float:
    return activity.seconds / 3600.0


def _speed_kmh(activity: Activity) -> float:
    return activity.parameters.km / _hours(activity)


def push_up_calories(activity: Activity, multiplier: float) -> float:
    met = select_met(activity.parameters.count, PUSH_UP_METS)
    return met * activity.heart_rate * _hours(activity) * multiplier


def diamond_push_up_calories(activity: Activity, multiplier: float) -> float:
    met = select_met(activity.parameters.count, DIAMOND_PUSH_UP_METS)
    return met * activity.heart_rate * _hours(activity) * multiplier


def weight_lifting_calories(activity: Activity, multiplier: float) -> float:
    met = select_met(activity.parameters.count, WEIGHT_LIFTING_METS)
    return met * activity.heart_rate * (activity.parameters.weight / 200.0) * multiplier


def track_run_calories(activity: Activity, multiplier: float) -> float:
    met = select_met(_speed_kmh(activity), TRACK_RUN_METS)
    return met * activity.heart_rate * activity.parameters.km * multiplier


def mountain_run_calories(activity: Activity, multiplier: float) -> float:
    met = select_met(_speed_kmh(activity), MOUNTAIN_RUN_METS)
    return (
        met
        * activity.heart_rate
        * _hours(activity)
        * (1.0 + activity.parameters.altimetry)
        * multiplier
    )


CALORIE_FORMULAS: Dict[ActivityKind, Callable[[Activity, float], float]] = {
    ActivityKind.PUSH_UP: push_up_calories,
    ActivityKind.DIAMOND_PUSH_UP: diamond_push_up_calories,
    ActivityKind.WEIGHT_LIFTING: weight_lifting_calories,
    ActivityKind.TRACK_RUN: track_run_calories,
    ActivityKind.MOUNTAIN_RUN: mountain_run_calories,
}


def count_calories(activity: Activity, multiplier: float) -> float:
    """Count the calories burned executing an activity.

    Args:
        activity: Activity being executed
        multiplier: Calorie multiplier of the user executing it

    Returns:
        Burned calories, in kcal
    """
    return CALORIE_FORMULAS[activity.kind](activity, multiplier)
