"""Ordered, duplicate-free collection of activities."""

import bisect
from typing import Iterable, Iterator, List, Set

from ..exceptions import NotFoundError
from .models import Activity


class ActivitySet:
    """Activities sorted by start time and duration, without repeated values.

    Activities with the same start and duration but different fields keep
    insertion order, the newest one after the others.
    """

    def __init__(self, activities: Iterable[Activity] = ()):
        self._items: List[Activity] = []
        self._members: Set[Activity] = set()
        self.update(activities)

    def add(self, activity: Activity) -> bool:
        """Add an activity, returning False if an equal one is already present."""
        if activity in self._members:
            return False
        bisect.insort_right(self._items, activity, key=Activity.sort_key)
        self._members.add(activity)
        return True

    def update(self, activities: Iterable[Activity]) -> None:
        for activity in activities:
            self.add(activity)

    def discard(self, activity: Activity) -> None:
        if activity in self._members:
            self._items.remove(activity)
            self._members.discard(activity)

    def remove_at(self, index: int) -> Activity:
        """Remove and return the activity at ``index`` (in sorted order).

        Raises:
            NotFoundError: ``index`` out of range. Negative indices are out of range.
        """
        if not 0 <= index < len(self._items):
            raise NotFoundError(f"No activity at index {index}")
        activity = self._items.pop(index)
        self._members.discard(activity)
        return activity

    def copy(self) -> "ActivitySet":
        clone = ActivitySet()
        clone._items = list(self._items)
        clone._members = set(self._members)
        return clone

    def to_list(self) -> List[Activity]:
        return list(self._items)

    def __contains__(self, activity: object) -> bool:
        return activity in self._members

    def __iter__(self) -> Iterator[Activity]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Activity:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ActivitySet):
            return NotImplemented
        return self._members == other._members

    def __repr__(self) -> str:
        return f"ActivitySet({self._items!r})"
