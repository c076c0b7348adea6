"""Activity value model.

An activity is an immutable value: a kind tag, the common timing fields and
one kind-specific parameter struct. Changing a field means building a new,
re-validated activity.
"""

from enum import Enum
from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta
from typing import Dict, Type, Union

from ..exceptions import ActivityError


def is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ActivityKind(Enum):
    """Kinds of activity a user can execute."""
    PUSH_UP = "push_up"
    DIAMOND_PUSH_UP = "diamond_push_up"
    WEIGHT_LIFTING = "weight_lifting"
    TRACK_RUN = "track_run"
    MOUNTAIN_RUN = "mountain_run"


@dataclass(frozen=True)
class Repetitions:
    """Number of repetitions in a set."""
    count: int

    def __post_init__(self):
        if not is_positive_int(self.count):
            raise ActivityError("Number of reps should be a positive number!")


@dataclass(frozen=True)
class WeightedRepetitions(Repetitions):
    """Repetitions executed with weights."""
    weight: float  # kg

    def __post_init__(self):
        super().__post_init__()
        if not is_number(self.weight) or not self.weight > 0:
            raise ActivityError("Weights' heft should be a positive number!")


@dataclass(frozen=True)
class Distance:
    """Distance of the route to be traversed."""
    km: float

    def __post_init__(self):
        if not is_number(self.km) or not self.km > 0:
            raise ActivityError("Distance to traverse should be a positive number!")


@dataclass(frozen=True)
class AltimetryDistance(Distance):
    """Distance over a route with an altimetry difficulty level."""
    altimetry: float  # 0.0 (flat) to 1.0

    def __post_init__(self):
        super().__post_init__()
        if not is_number(self.altimetry) or not 0.0 <= self.altimetry <= 1.0:
            raise ActivityError("Altimetry of activity must be in [0.0; 1.0]!")


Parameters = Union[Repetitions, WeightedRepetitions, Distance, AltimetryDistance]

# Exact parameter struct each kind carries
KIND_PARAMETERS: Dict[ActivityKind, Type] = {
    ActivityKind.PUSH_UP: Repetitions,
    ActivityKind.DIAMOND_PUSH_UP: Repetitions,
    ActivityKind.WEIGHT_LIFTING: WeightedRepetitions,
    ActivityKind.TRACK_RUN: Distance,
    ActivityKind.MOUNTAIN_RUN: AltimetryDistance,
}


@dataclass(frozen=True)
class Activity:
    """An exercise activity that was / will be executed by a user.

    Activities sort by start time, then by duration. Activities that only
    differ in other fields are never equal, and sorting keeps their relative
    order.
    """
    kind: ActivityKind
    duration: timedelta
    start: datetime
    heart_rate: int  # bpm
    parameters: Parameters

    def __post_init__(self):
        if not isinstance(self.kind, ActivityKind):
            raise ActivityError(f"Unknown activity kind: {self.kind!r}")
        if not isinstance(self.duration, timedelta) or self.duration.total_seconds() < 1:
            raise ActivityError("An exercise should last at least one second long!")
        if not isinstance(self.start, datetime):
            raise ActivityError("The execution date of an activity must be a datetime!")
        if not is_positive_int(self.heart_rate):
            raise ActivityError("The average BPM during exercise must be a positive number!")

        expected = KIND_PARAMETERS[self.kind]
        if type(self.parameters) is not expected:
            raise ActivityError(
                f"A {self.kind.value} activity needs {expected.__name__} parameters, "
                f"got {type(self.parameters).__name__}"
            )

    @property
    def end(self) -> datetime:
        """Time when this activity finishes."""
        return self.start + self.duration

    @property
    def seconds(self) -> int:
        """Duration of this activity in whole seconds."""
        return int(self.duration.total_seconds())

    @property
    def name(self) -> str:
        return self.kind.value

    def sort_key(self):
        return (self.start, self.duration)

    def __lt__(self, other: "Activity") -> bool:
        if not isinstance(other, Activity):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def with_start(self, start: datetime) -> "Activity":
        return replace(self, start=start)

    def with_duration(self, duration: timedelta) -> "Activity":
        return replace(self, duration=duration)

    def with_heart_rate(self, heart_rate: int) -> "Activity":
        return replace(self, heart_rate=heart_rate)

    def on_date(self, day: date) -> "Activity":
        """Move this activity to another day, keeping its time of day."""
        return replace(self, start=datetime.combine(day, self.start.time()))

    def overlaps(self, other: "Activity") -> bool:
        """Check if this activity shares any instant of time with another one."""
        from ..schedule.overlap import overlaps
        return overlaps(self, other)

    def count_calories(self, multiplier: float) -> float:
        """Count the calories (kcal) a user with the given multiplier burns."""
        from .calories import count_calories
        return count_calories(self, multiplier)


def push_up(duration: timedelta, start: datetime, heart_rate: int, repetitions: int) -> Activity:
    return Activity(ActivityKind.PUSH_UP, duration, start, heart_rate, Repetitions(repetitions))


def diamond_push_up(duration: timedelta, start: datetime, heart_rate: int,
                    repetitions: int) -> Activity:
    return Activity(ActivityKind.DIAMOND_PUSH_UP, duration, start, heart_rate,
                    Repetitions(repetitions))


def weight_lifting(duration: timedelta, start: datetime, heart_rate: int,
                   repetitions: int, weight: float) -> Activity:
    return Activity(ActivityKind.WEIGHT_LIFTING, duration, start, heart_rate,
                    WeightedRepetitions(repetitions, weight))


def track_run(duration: timedelta, start: datetime, heart_rate: int, distance: float) -> Activity:
    return Activity(ActivityKind.TRACK_RUN, duration, start, heart_rate, Distance(distance))


def mountain_run(duration: timedelta, start: datetime, heart_rate: int,
                 distance: float, altimetry: float) -> Activity:
    return Activity(ActivityKind.MOUNTAIN_RUN, duration, start, heart_rate,
                    AltimetryDistance(distance, altimetry))
