"""Aggregation queries over users and their completed activities.

A query is fed users one at a time through ``visit`` (usually by
``FitnessTracker.run_query``) and folds them into a single result. Queries
never change the users they visit and only keep copies of them.
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional, Tuple, Type

import numpy as np

from ..activity.models import Activity, Distance
from ..users.user import User

logger = logging.getLogger(__name__)


class UserQuery:
    """A fold over visited users."""

    def visit(self, user: User) -> None:
        raise NotImplementedError

    def result(self):
        raise NotImplementedError

    def reset(self) -> None:
        raise NotImplementedError


class WindowedQuery(UserQuery):
    """Query restricted to activities ending strictly between two dates."""

    def __init__(self, start: Optional[datetime] = None, end: Optional[datetime] = None):
        """Initialize the date window.

        Args:
            start: Activities must end after this date (unbounded if None)
            end: Activities must end before this date (unbounded if None)
        """
        self.start = start if start is not None else datetime.min
        self.end = end if end is not None else datetime.max

    def activity_fits(self, activity: Activity) -> bool:
        return self.start < activity.end < self.end

    def completed_in_window(self, user: User) -> List[Activity]:
        return [activity for activity in user.ledger.done if self.activity_fits(activity)]


class MaxUserQuery(UserQuery):
    """Keeps the first visited user with the highest value."""

    def __init__(self):
        self._max_user: Optional[User] = None
        self._max_value: float = -1

    def _consider(self, user: User, value: float) -> None:
        if value > self._max_value:
            self._max_value = value
            self._max_user = user.copy()

    def result(self) -> Optional[Tuple[User, float]]:
        """Get ``(user, value)`` for the top user, or None before any visit."""
        if self._max_user is None:
            return None
        return self._max_user.copy(), self._max_value

    def reset(self) -> None:
        self._max_user = None
        self._max_value = -1


class DistanceQuery(WindowedQuery):
    """Distance traversed by a user in completed activities of a given type.

    Meant to be run on a single user: every visit replaces the result.
    """

    def __init__(self,
                 parameter_type: Type[Distance] = Distance,
                 start: Optional[datetime] = None,
                 end: Optional[datetime] = None):
        """Initialize the query.

        Args:
            parameter_type: Only activities whose parameters are instances of
                this type count (``Distance`` for every run, ``AltimetryDistance``
                for mountain runs only)
            start: Window start
            end: Window end
        """
        super().__init__(start, end)
        self.parameter_type = parameter_type
        self._user: Optional[User] = None
        self._distance: float = -1.0

    def visit(self, user: User) -> None:
        distances = [
            activity.parameters.km
            for activity in self.completed_in_window(user)
            if isinstance(activity.parameters, self.parameter_type)
        ]
        self._user = user.copy()
        self._distance = float(np.sum(distances))

    def result(self) -> Optional[Tuple[User, float]]:
        """Get ``(user, km)`` for the last visited user, or None before any visit."""
        if self._user is None:
            return None
        return self._user.copy(), self._distance

    def reset(self) -> None:
        self._user = None
        self._distance = -1.0


class MostActivitiesQuery(WindowedQuery, MaxUserQuery):
    """User who completed the most activities."""

    def __init__(self, start: Optional[datetime] = None, end: Optional[datetime] = None):
        WindowedQuery.__init__(self, start, end)
        MaxUserQuery.__init__(self)

    def visit(self, user: User) -> None:
        self._consider(user, len(self.completed_in_window(user)))


class MostCaloriesQuery(WindowedQuery, MaxUserQuery):
    """User who burned the most calories in completed activities."""

    def __init__(self, start: Optional[datetime] = None, end: Optional[datetime] = None):
        WindowedQuery.__init__(self, start, end)
        MaxUserQuery.__init__(self)

    def visit(self, user: User) -> None:
        multiplier = user.calorie_multiplier
        calories = [activity.count_calories(multiplier) for activity in self.completed_in_window(user)]
        self._consider(user, float(np.sum(calories)))


class HardestTrainingPlanQuery(MaxUserQuery):
    """User whose training plan burns the most calories per execution."""

    def visit(self, user: User) -> None:
        self._consider(user, user.ledger.plan.count_calories(user.calorie_multiplier))


class MostCommonActivityQuery(WindowedQuery):
    """Kind of activity completed the most times, across every visited user.

    Ties go to the kind that was counted first: kinds are scanned in the
    order they were first seen, keeping a new maximum only when it is
    strictly higher. The winner of a tie therefore depends on the order users
    are visited in.
    """

    def __init__(self, start: Optional[datetime] = None, end: Optional[datetime] = None):
        super().__init__(start, end)
        self._counts: Dict[str, int] = {}

    @property
    def counts(self) -> Dict[str, int]:
        return dict(self._counts)

    def visit(self, user: User) -> None:
        for activity in self.completed_in_window(user):
            self._counts[activity.name] = self._counts.get(activity.name, 0) + 1

    def result(self) -> Optional[Tuple[str, int]]:
        """Get ``(kind name, count)`` of the most common kind, or None if nothing was counted."""
        top: Optional[Tuple[str, int]] = None
        for name, count in self._counts.items():
            if top is None or count > top[1]:
                top = (name, count)
        return top

    def reset(self) -> None:
        self._counts = {}
