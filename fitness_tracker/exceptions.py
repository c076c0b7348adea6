"""Errors raised by the fitness tracker.

Every error is raised before any state change, so the object that raised it
is left exactly as it was before the call.
"""


class FitnessError(Exception):
    """Base class for all fitness tracker errors."""


class ValidationError(FitnessError, ValueError):
    """A field was given a value outside its allowed range."""


class ActivityError(ValidationError):
    """An activity was built or modified with invalid fields."""


class UserError(ValidationError):
    """A user was built with invalid fields."""


class OverlapError(FitnessError):
    """Two activities would occupy the same time slot."""


class NotFoundError(FitnessError, LookupError):
    """An index or user code does not refer to anything."""


class OrderingError(FitnessError):
    """A point in time is not after the application's current time."""
