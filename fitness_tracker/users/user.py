"""Users of the fitness tracker."""

from enum import Enum
from dataclasses import dataclass, field, replace

from ..activity.models import is_positive_int
from ..config import Config
from ..exceptions import UserError
from ..schedule.ledger import UserLedger


class UserLevel(Enum):
    """Experience level of a user, deciding how many calories they burn."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


@dataclass
class User:
    """A user of the fitness tracker and their activities."""
    code: int
    name: str
    address: str
    email: str
    average_bpm: int  # Average cardiac rhythm while exercising
    level: UserLevel = UserLevel.BEGINNER
    ledger: UserLedger = field(default_factory=UserLedger)

    def __post_init__(self):
        if not is_positive_int(self.average_bpm):
            raise UserError("The average BPM of an user must be a positive number!")
        if not isinstance(self.level, UserLevel):
            raise UserError(f"Unknown user level: {self.level!r}")

    @property
    def calorie_multiplier(self) -> float:
        return Config.get_calorie_multiplier(self.level)

    def copy(self) -> "User":
        """Create a deep copy of this user."""
        return replace(self, ledger=self.ledger.copy())
