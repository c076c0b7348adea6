"""Construction of activities from a kind tag and loose fields.

Used by callers that collect activity fields from outside input and only
know the kind at runtime.
"""

from datetime import datetime, timedelta
from typing import Callable, Dict, Tuple, Union

from ..exceptions import ActivityError
from .models import (
    Activity,
    ActivityKind,
    diamond_push_up,
    mountain_run,
    push_up,
    track_run,
    weight_lifting,
)

# Kind -> (constructor, names of the kind-specific fields it takes)
ACTIVITY_BUILDERS: Dict[ActivityKind, Tuple[Callable[..., Activity], Tuple[str, ...]]] = {
    ActivityKind.PUSH_UP: (push_up, ("repetitions",)),
    ActivityKind.DIAMOND_PUSH_UP: (diamond_push_up, ("repetitions",)),
    ActivityKind.WEIGHT_LIFTING: (weight_lifting, ("repetitions", "weight")),
    ActivityKind.TRACK_RUN: (track_run, ("distance",)),
    ActivityKind.MOUNTAIN_RUN: (mountain_run, ("distance", "altimetry")),
}


def parse_kind(kind: Union[ActivityKind, str]) -> ActivityKind:
    """Turn a kind tag (enum member or its string value) into an ActivityKind."""
    if isinstance(kind, ActivityKind):
        return kind
    try:
        return ActivityKind(str(kind).strip().lower())
    except ValueError:
        raise ActivityError(f"Unknown activity kind: {kind!r}") from None


def required_fields(kind: Union[ActivityKind, str]) -> Tuple[str, ...]:
    """Get the names of the kind-specific fields an activity kind needs."""
    return ACTIVITY_BUILDERS[parse_kind(kind)][1]


def build_activity(kind: Union[ActivityKind, str],
                   duration: timedelta,
                   start: datetime,
                   heart_rate: int,
                   **extras) -> Activity:
    """Build an activity of a kind chosen at runtime.

    Args:
        kind: Activity kind, or its string value (e.g. ``"track_run"``)
        duration: Duration of the activity
        start: When the activity was / will be executed
        heart_rate: Cardiac rhythm while executing the activity
        **extras: Kind-specific fields, named as in ``required_fields(kind)``

    Returns:
        The new activity

    Raises:
        ActivityError: Unknown kind, missing / unexpected fields or invalid values
    """
    builder, fields = ACTIVITY_BUILDERS[parse_kind(kind)]

    missing = [name for name in fields if name not in extras]
    unexpected = sorted(set(extras) - set(fields))
    if missing or unexpected:
        raise ActivityError(
            f"Invalid fields for {parse_kind(kind).value}: "
            f"missing={missing}, unexpected={unexpected}"
        )

    return builder(duration, start, heart_rate, *(extras[name] for name in fields))
