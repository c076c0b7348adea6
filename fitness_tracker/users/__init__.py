"""Users and the tracker that owns them."""

from .user import User, UserLevel
from .tracker import FitnessTracker

__all__ = ["User", "UserLevel", "FitnessTracker"]
