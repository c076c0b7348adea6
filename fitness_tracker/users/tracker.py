"""The fitness tracker: every user and the application's virtual clock."""

import logging
from datetime import datetime
from typing import Dict, Iterable, Optional

from ..activity.models import Activity
from ..exceptions import NotFoundError, OrderingError
from .user import User

logger = logging.getLogger(__name__)


class FitnessTracker:
    """
    Owns every user, keyed by code, and the current application time.

    Time only moves forward, through ``leap_forward``, which completes the
    activities of every user up to the new time.
    """

    def __init__(self, now: Optional[datetime] = None):
        self._users: Dict[int, User] = {}
        self._now = now if now is not None else datetime.now()
        self._next_user_code = 1

    @property
    def now(self) -> datetime:
        return self._now

    @property
    def next_user_code(self) -> int:
        return self._next_user_code

    @property
    def users(self) -> Dict[int, User]:
        """Copies of every user, sorted by code."""
        return {code: self._users[code].copy() for code in sorted(self._users)}

    def is_empty(self) -> bool:
        return not self._users

    def _user(self, code: int) -> User:
        try:
            return self._users[code]
        except KeyError:
            raise NotFoundError(f"User {code} does not exist!") from None

    def get_user(self, code: int) -> User:
        """Get a copy of a user.

        Raises:
            NotFoundError: No user with ``code``
        """
        return self._user(code).copy()

    def add_user(self, user: User) -> int:
        """Register a copy of ``user`` under a new code, returning that code."""
        code = self._next_user_code
        registered = user.copy()
        registered.code = code
        self._users[code] = registered
        self._next_user_code += 1
        logger.info(f"Registered user {code} ({user.name})")
        return code

    def remove_user(self, code: int) -> None:
        self._user(code)
        del self._users[code]
        logger.info(f"Removed user {code}")

    def add_activity(self, code: int, activity: Activity) -> None:
        """Schedule an activity for a user, with the user's average heart rate.

        Raises:
            NotFoundError: No user with ``code``
            OrderingError: ``activity`` starts before the current time
            OverlapError: ``activity`` overlaps the user's schedule
        """
        if activity.start < self._now:
            raise OrderingError(f"Activity starts at {activity.start}, before {self._now}")

        user = self._user(code)
        user.ledger.add_todo(activity.with_heart_rate(user.average_bpm))

    def remove_activity(self, code: int, index: int) -> Activity:
        return self._user(code).ledger.remove_todo(index)

    def add_plan_activity(self, code: int, activity: Activity, times: int) -> None:
        """Add an activity to a user's training plan, with the user's average heart rate.

        Raises:
            NotFoundError: No user with ``code``
            OverlapError: The activity overlaps the plan, or the new plan overlaps
                the user's todo activities
            ValidationError: ``times`` isn't positive
        """
        user = self._user(code)
        plan = user.ledger.plan
        plan.add(activity.with_heart_rate(user.average_bpm), times)
        user.ledger.set_plan(plan)

    def set_plan_days(self, code: int, weekdays: Iterable[int]) -> None:
        """Set the days of the week a user's training plan is executed.

        Raises:
            NotFoundError: No user with ``code``
            OverlapError: The plan would overlap the user's todo activities
        """
        user = self._user(code)
        plan = user.ledger.plan
        plan.set_weekdays(weekdays)
        user.ledger.set_plan(plan)

    def leap_forward(self, goal: datetime) -> None:
        """Advance the current time to ``goal``, completing every user's activities.

        Raises:
            OrderingError: ``goal`` isn't after the current time
        """
        if not goal > self._now:
            raise OrderingError(f"Date {goal} not after current date {self._now}!")

        for user in self._users.values():
            user.ledger.leap_forward(self._now, goal)

        logger.info(f"Leaped forward from {self._now} to {goal}")
        self._now = goal

    def run_query(self, query, code: Optional[int] = None) -> None:
        """Let a query visit one user, or every user in code order.

        Raises:
            NotFoundError: No user with ``code``
        """
        if code is not None:
            query.visit(self._user(code).copy())
            return

        for user_code in sorted(self._users):
            query.visit(self._users[user_code].copy())
