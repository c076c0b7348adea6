"""Interval overlap test between two timed activities."""

from typing import Iterable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..activity.models import Activity


def overlaps(a: "Activity", b: "Activity") -> bool:
    """Check if two activities share any instant of time.

    Activities are half-open intervals ``[start, start + duration)``, so one
    ending exactly when the other starts doesn't overlap it.
    """
    return a.start < b.end and b.start < a.end


def first_overlap(activity: "Activity", others: Iterable["Activity"]) -> Optional["Activity"]:
    """Get the first activity in ``others`` overlapping ``activity``, if any."""
    for other in others:
        if overlaps(activity, other):
            return other
    return None
