"""Training plan: activities repeated on fixed days of the week."""

import bisect
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, List, Mapping, Set, Tuple, Union

import numpy as np

from ..activity.collection import ActivitySet
from ..activity.models import Activity, is_positive_int
from ..config import Config
from ..exceptions import NotFoundError, OverlapError, ValidationError
from .overlap import first_overlap

logger = logging.getLogger(__name__)

WEEKDAYS = range(7)  # 0=Monday, 6=Sunday


@dataclass(frozen=True)
class PlanEntry:
    """A template activity executed ``times`` times in a row."""
    activity: Activity
    times: int

    def block(self) -> Activity:
        """The template stretched over all of its consecutive executions."""
        return self.activity.with_duration(self.activity.duration * self.times)


PlanEntries = Union[Mapping[Activity, int], Iterable[Union[PlanEntry, Tuple[Activity, int]]]]


def _pairs(entries: PlanEntries) -> List[Tuple[Activity, int]]:
    if isinstance(entries, Mapping):
        return list(entries.items())
    return [
        (entry.activity, entry.times) if isinstance(entry, PlanEntry) else tuple(entry)
        for entry in entries
    ]


class TrainingPlan:
    """
    A training plan, composed of activities that are executed on many days of
    the week.

    Only the time of day of template activities matters: their date is moved
    to the plan epoch (``Config.get_plan_epoch()``). Activities repeated many
    times are executed consecutively, and no two repeat blocks may overlap.
    """

    def __init__(self, entries: PlanEntries = (), weekdays: Iterable[int] = ()):
        """Create a training plan.

        Args:
            entries: Template activities with the number of times each one is
                executed, as a mapping, ``(activity, times)`` pairs or PlanEntry
            weekdays: Days of the week the plan is executed (0=Monday, 6=Sunday)

        Raises:
            OverlapError: Overlapping entries
            ValidationError: Non-positive repetitions or invalid weekday
        """
        self._entries: List[PlanEntry] = []
        self._weekdays: Set[int] = set()
        if entries:
            self.set(entries)
        self.set_weekdays(weekdays)

    @property
    def entries(self) -> List[PlanEntry]:
        """Plan entries, sorted by time of day."""
        return list(self._entries)

    @property
    def weekdays(self) -> Set[int]:
        return set(self._weekdays)

    def set_weekdays(self, weekdays: Iterable[int]) -> None:
        days = set(weekdays)
        invalid = sorted(str(day) for day in days if day not in WEEKDAYS)
        if invalid:
            raise ValidationError(f"Invalid days of the week: {', '.join(invalid)}")
        self._weekdays = days

    @staticmethod
    def _normalize(activity: Activity) -> Activity:
        return activity.on_date(Config.get_plan_epoch())

    def _overlaps_daytime_only(self, activity: Activity) -> bool:
        """Check an already normalized activity against every repeat block."""
        blocks = (entry.block() for entry in self._entries)
        return first_overlap(activity, blocks) is not None

    def overlaps_external(self, activity: Activity) -> bool:
        """Check if an activity overlaps any execution of this plan.

        Activities on days of the week the plan isn't executed never overlap.
        """
        if activity.start.weekday() not in self._weekdays:
            return False
        return self._overlaps_daytime_only(self._normalize(activity))

    def add(self, activity: Activity, times: int) -> None:
        """Add a template activity to this plan.

        Args:
            activity: Template activity. Its date is ignored, only the time of day is kept
            times: Number of times ``activity`` is executed consecutively

        Raises:
            ValidationError: ``times`` isn't a positive integer
            OverlapError: The repeat block overlaps one already in the plan
        """
        if not is_positive_int(times):
            raise ValidationError("Number of activity executions should be a positive number!")

        entry = PlanEntry(self._normalize(activity), times)
        if self._overlaps_daytime_only(entry.block()):
            logger.warning(f"Rejected plan activity at {activity.start.time()}: overlaps plan")
            raise OverlapError(
                f"{activity.name} at {activity.start.time()} (x{times}) overlaps the training plan"
            )

        bisect.insort_right(self._entries, entry, key=lambda e: e.activity.sort_key())
        logger.debug(f"Added {activity.name} x{times} at {activity.start.time()} to training plan")

    def remove(self, index: int) -> None:
        """Remove the ``index``-th entry of this plan.

        Raises:
            NotFoundError: ``index`` out of range
        """
        if not 0 <= index < len(self._entries):
            raise NotFoundError(f"No training plan activity at index {index}")
        removed = self._entries.pop(index)
        logger.debug(f"Removed {removed.activity.name} from training plan")

    def set(self, entries: PlanEntries) -> None:
        """Replace all entries of this plan. Nothing changes if any of them overlap.

        Raises:
            OverlapError: Overlapping entries
            ValidationError: Non-positive repetitions
        """
        candidate = TrainingPlan()
        for activity, times in _pairs(entries):
            candidate.add(activity, times)
        self._entries = candidate._entries

    def occurrences_between(self, start: datetime, end: datetime) -> ActivitySet:
        """Get the plan executions finished by ``end``, on days from ``start`` to ``end``.

        Every day from ``start.date()`` to ``end.date()`` (inclusive) the plan is
        executed on yields every repetition of every template, placed on that
        day. Only the ones ending at or before ``end`` are kept.
        """
        occurrences = ActivitySet()
        day = start.date()
        while day <= end.date():
            if day.weekday() in self._weekdays:
                for entry in self._entries:
                    first = entry.activity.on_date(day)
                    for i in range(entry.times):
                        occurrence = first.with_start(first.start + entry.activity.duration * i)
                        if occurrence.end <= end:
                            occurrences.add(occurrence)
            day += timedelta(days=1)
        return occurrences

    def count_calories(self, multiplier: float) -> float:
        """Count the calories burned executing this whole plan once."""
        calories = [entry.activity.count_calories(multiplier) * entry.times for entry in self._entries]
        return float(np.sum(calories))

    def copy(self) -> "TrainingPlan":
        clone = TrainingPlan()
        clone._entries = list(self._entries)
        clone._weekdays = set(self._weekdays)
        return clone

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrainingPlan):
            return NotImplemented
        return self._entries == other._entries and self._weekdays == other._weekdays

    def __repr__(self) -> str:
        return f"TrainingPlan(entries={self._entries!r}, weekdays={sorted(self._weekdays)!r})"
