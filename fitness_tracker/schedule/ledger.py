"""Per-user ledger of pending and completed activities."""

import logging
from datetime import datetime
from typing import Iterable, List, Optional

from ..activity.collection import ActivitySet
from ..activity.models import Activity
from ..exceptions import OverlapError
from .overlap import first_overlap
from .training_plan import TrainingPlan

logger = logging.getLogger(__name__)


class UserLedger:
    """
    The activities of a user: the ones still to execute (todo), the ones
    already completed (done) and the training plan being followed.

    No todo activity overlaps another one, nor any execution of the plan.
    Completed activities aren't checked for overlapping. Accessors return
    copies, so callers never hold live references into a ledger.
    """

    def __init__(self,
                 todo: Iterable[Activity] = (),
                 done: Iterable[Activity] = (),
                 plan: Optional[TrainingPlan] = None):
        """Create a ledger.

        Raises:
            OverlapError: ``todo`` activities overlap each other or ``plan``
        """
        self._todo = ActivitySet()
        self._done = ActivitySet(done)
        self._plan = plan.copy() if plan is not None else TrainingPlan()
        self.set_todo(todo)

    @property
    def todo(self) -> List[Activity]:
        return self._todo.to_list()

    @property
    def done(self) -> List[Activity]:
        return self._done.to_list()

    @property
    def plan(self) -> TrainingPlan:
        return self._plan.copy()

    @staticmethod
    def _check_fits(activity: Activity, todo: ActivitySet, plan: TrainingPlan) -> None:
        if plan.overlaps_external(activity):
            logger.warning(f"Rejected {activity.name} at {activity.start}: overlaps training plan")
            raise OverlapError(f"{activity.name} at {activity.start} overlaps the training plan")

        conflict = first_overlap(activity, todo)
        if conflict is not None:
            logger.warning(f"Rejected {activity.name} at {activity.start}: overlaps {conflict.name}")
            raise OverlapError(
                f"{activity.name} at {activity.start} overlaps {conflict.name} at {conflict.start}"
            )

    @classmethod
    def _build_todo(cls, activities: Iterable[Activity], plan: TrainingPlan) -> ActivitySet:
        todo = ActivitySet()
        for activity in activities:
            cls._check_fits(activity, todo, plan)
            todo.add(activity)
        return todo

    def add_todo(self, activity: Activity) -> None:
        """Add an activity to the ones still to execute.

        Raises:
            OverlapError: ``activity`` overlaps a todo activity or the training plan
        """
        self._check_fits(activity, self._todo, self._plan)
        self._todo.add(activity)
        logger.debug(f"Scheduled {activity.name} at {activity.start}")

    def set_todo(self, activities: Iterable[Activity]) -> None:
        """Replace the activities still to execute. Nothing changes on overlap.

        Raises:
            OverlapError: ``activities`` overlap each other or the training plan
        """
        self._todo = self._build_todo(activities, self._plan)

    def set_done(self, activities: Iterable[Activity]) -> None:
        """Replace the completed activities. No overlapping checks are performed."""
        self._done = ActivitySet(activities)

    def set_plan(self, plan: TrainingPlan) -> None:
        """Replace the training plan, re-checking the todo activities against it.

        Raises:
            OverlapError: A todo activity overlaps the new plan. Neither the plan
                nor the todo activities change.
        """
        new_plan = plan.copy()
        todo = self._build_todo(self._todo, new_plan)
        self._plan = new_plan
        self._todo = todo

    def remove_todo(self, index: int) -> Activity:
        """Remove the ``index``-th activity still to execute (in time order).

        Raises:
            NotFoundError: ``index`` out of range
        """
        removed = self._todo.remove_at(index)
        logger.debug(f"Unscheduled {removed.name} at {removed.start}")
        return removed

    def leap_forward(self, now: datetime, goal: datetime) -> None:
        """Advance time from ``now`` to ``goal``, completing finished activities.

        Todo activities ending at or before ``goal`` move to done, and the plan
        executions between ``now`` and ``goal`` are added to done. Callers must
        leap over advancing, non-overlapping windows.
        """
        finished = [activity for activity in self._todo if activity.end <= goal]
        for activity in finished:
            self._todo.discard(activity)
            self._done.add(activity)

        occurrences = self._plan.occurrences_between(now, goal)
        self._done.update(occurrences)
        logger.debug(
            f"Leaped {now} -> {goal}: {len(finished)} todo completed, "
            f"{len(occurrences)} plan executions"
        )

    def copy(self) -> "UserLedger":
        clone = UserLedger()
        clone._todo = self._todo.copy()
        clone._done = self._done.copy()
        clone._plan = self._plan.copy()
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UserLedger):
            return NotImplemented
        return (
            self._todo == other._todo
            and self._done == other._done
            and self._plan == other._plan
        )

    def __repr__(self) -> str:
        return f"UserLedger(todo={self.todo!r}, done={self.done!r}, plan={self._plan!r})"
