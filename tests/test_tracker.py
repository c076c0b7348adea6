"""Tests for users and the fitness tracker."""

import pytest
from datetime import datetime, timedelta
from fitness_tracker.activity import mountain_run, push_up
from fitness_tracker.analysis import MostActivitiesQuery
from fitness_tracker.exceptions import (
    NotFoundError,
    OrderingError,
    OverlapError,
    UserError,
    ValidationError,
)
from fitness_tracker.users import FitnessTracker, User, UserLevel

MONDAY, THURSDAY, FRIDAY = 0, 3, 4


class TestUser:
    """Test user validation and copying."""

    def test_invalid_bpm(self):
        """Test the average heart rate must be positive."""
        with pytest.raises(UserError):
            User(0, "Ana", "Braga", "ana@example.com", 0)
        with pytest.raises(ValidationError):
            User(0, "Ana", "Braga", "ana@example.com", -60)

    def test_bool_bpm(self):
        """Test a boolean isn't accepted as the average heart rate."""
        with pytest.raises(UserError):
            User(0, "Ana", "Braga", "ana@example.com", True)

    def test_invalid_level(self):
        """Test levels must be UserLevel members."""
        with pytest.raises(UserError):
            User(0, "Ana", "Braga", "ana@example.com", 90, "expert")

    def test_calorie_multiplier(self):
        """Test each level's default multiplier."""
        assert User(0, "A", "B", "c", 90).calorie_multiplier == 1.0
        assert User(0, "A", "B", "c", 90, UserLevel.INTERMEDIATE).calorie_multiplier == 1.25
        assert User(0, "A", "B", "c", 90, UserLevel.ADVANCED).calorie_multiplier == 1.5

    def test_copy_is_deep(self):
        """Test a copy doesn't share its ledger."""
        user = User(0, "Ana", "Braga", "ana@example.com", 90)
        copy = user.copy()
        copy.ledger.add_todo(push_up(timedelta(minutes=10), datetime(2024, 5, 6, 11, 0), 90, 20))

        assert user.ledger.todo == []
        assert copy != user


class TestFitnessTracker:
    """Test user registration, scheduling and time travel."""

    def setup_method(self):
        """Set up a tracker at the start of May 2024 with one user."""
        self.now = datetime(2024, 5, 1, 0, 0)
        self.tracker = FitnessTracker(self.now)
        self.user = User(0, "Ana", "Braga", "ana@example.com", 90, UserLevel.INTERMEDIATE)
        self.code = self.tracker.add_user(self.user)

    def test_new_tracker(self):
        """Test an empty tracker."""
        tracker = FitnessTracker(self.now)
        assert tracker.is_empty()
        assert tracker.next_user_code == 1
        assert tracker.now == self.now

    def test_add_user_assigns_codes(self):
        """Test codes increase from 1 and the caller's user isn't changed."""
        assert self.code == 1
        assert self.tracker.add_user(self.user) == 2
        assert self.tracker.next_user_code == 3
        assert self.user.code == 0
        assert list(self.tracker.users) == [1, 2]
        assert self.tracker.get_user(2).code == 2

    def test_get_user_returns_copy(self):
        """Test changing a fetched user doesn't change the tracker."""
        user = self.tracker.get_user(self.code)
        user.name = "Other"
        assert self.tracker.get_user(self.code).name == "Ana"

    def test_unknown_user(self):
        """Test operations on unknown codes fail."""
        with pytest.raises(NotFoundError):
            self.tracker.get_user(42)
        with pytest.raises(NotFoundError):
            self.tracker.remove_user(42)
        with pytest.raises(NotFoundError):
            self.tracker.add_activity(42, push_up(timedelta(minutes=10), self.now, 90, 20))

    def test_remove_user(self):
        """Test removal empties the tracker but codes aren't reused."""
        self.tracker.remove_user(self.code)
        assert self.tracker.is_empty()
        assert self.tracker.add_user(self.user) == 2

    def test_add_activity_uses_user_bpm(self):
        """Test scheduled activities get the user's average heart rate."""
        activity = push_up(timedelta(minutes=10), datetime(2024, 5, 6, 11, 0), 150, 20)
        self.tracker.add_activity(self.code, activity)

        todo = self.tracker.get_user(self.code).ledger.todo
        assert todo == [activity.with_heart_rate(90)]

    def test_add_activity_in_the_past(self):
        """Test activities can't be scheduled before the current time."""
        past = push_up(timedelta(minutes=10), datetime(2024, 4, 30, 23, 0), 90, 20)
        with pytest.raises(OrderingError):
            self.tracker.add_activity(self.code, past)

    def test_add_activity_overlap(self):
        """Test overlapping activities are rejected."""
        self.tracker.add_activity(
            self.code, push_up(timedelta(minutes=10), datetime(2024, 5, 6, 11, 0), 90, 20)
        )
        with pytest.raises(OverlapError):
            self.tracker.add_activity(
                self.code, push_up(timedelta(minutes=10), datetime(2024, 5, 6, 11, 5), 90, 20)
            )

    def test_remove_activity(self):
        """Test removing a todo activity by index."""
        activity = push_up(timedelta(minutes=10), datetime(2024, 5, 6, 11, 0), 90, 20)
        self.tracker.add_activity(self.code, activity)

        with pytest.raises(NotFoundError):
            self.tracker.remove_activity(self.code, 1)
        assert self.tracker.remove_activity(self.code, 0) == activity
        assert self.tracker.get_user(self.code).ledger.todo == []

    def test_plan_days_are_atomic(self):
        """Test plan changes that clash with todo activities are rejected."""
        run = mountain_run(timedelta(minutes=50), datetime(2024, 5, 3, 8, 0), 120, 8.0, 0.3)
        self.tracker.add_plan_activity(self.code, run, 1)
        self.tracker.set_plan_days(self.code, {FRIDAY})
        self.tracker.add_activity(
            self.code, push_up(timedelta(minutes=10), datetime(2024, 5, 9, 8, 10), 90, 20)
        )

        with pytest.raises(OverlapError):
            self.tracker.set_plan_days(self.code, {THURSDAY, FRIDAY})

        plan = self.tracker.get_user(self.code).ledger.plan
        assert plan.weekdays == {FRIDAY}
        assert plan.entries[0].activity.heart_rate == 90

    def test_add_plan_activity_invalid_times(self):
        """Test plan repeat counts must be positive."""
        run = mountain_run(timedelta(minutes=50), datetime(2024, 5, 3, 8, 0), 120, 8.0, 0.3)
        with pytest.raises(ValidationError):
            self.tracker.add_plan_activity(self.code, run, 0)
        assert len(self.tracker.get_user(self.code).ledger.plan) == 0

    def test_leap_forward(self):
        """Test time travel completes todo activities and plan executions."""
        self.tracker.add_activity(
            self.code, push_up(timedelta(minutes=10), datetime(2024, 5, 6, 11, 0), 90, 20)
        )
        run = mountain_run(timedelta(minutes=50), datetime(2024, 5, 3, 8, 0), 120, 8.0, 0.3)
        self.tracker.add_plan_activity(self.code, run, 1)
        self.tracker.set_plan_days(self.code, {MONDAY})

        goal = datetime(2024, 5, 7, 0, 0)
        self.tracker.leap_forward(goal)

        assert self.tracker.now == goal
        ledger = self.tracker.get_user(self.code).ledger
        assert ledger.todo == []
        assert [a.name for a in ledger.done] == ["mountain_run", "push_up"]

    def test_leap_forward_must_advance(self):
        """Test time can't stand still or go back."""
        with pytest.raises(OrderingError):
            self.tracker.leap_forward(self.now)
        with pytest.raises(OrderingError):
            self.tracker.leap_forward(self.now - timedelta(days=1))
        assert self.tracker.now == self.now

    def test_run_query_single_user(self):
        """Test running a query on one user or an unknown one."""
        query = MostActivitiesQuery()
        self.tracker.run_query(query, self.code)
        assert query.result()[0].code == self.code

        with pytest.raises(NotFoundError):
            self.tracker.run_query(query, 42)
