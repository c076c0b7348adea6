"""Configuration management for the fitness tracker."""

import os
from datetime import date, datetime
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration."""

    # Application
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Calorie multipliers by user experience level
    BEGINNER_CALORIE_MULTIPLIER: float = float(os.getenv("BEGINNER_CALORIE_MULTIPLIER", "1.0"))
    INTERMEDIATE_CALORIE_MULTIPLIER: float = float(os.getenv("INTERMEDIATE_CALORIE_MULTIPLIER", "1.25"))
    ADVANCED_CALORIE_MULTIPLIER: float = float(os.getenv("ADVANCED_CALORIE_MULTIPLIER", "1.5"))

    CALORIE_MULTIPLIERS = {
        "beginner": BEGINNER_CALORIE_MULTIPLIER,
        "intermediate": INTERMEDIATE_CALORIE_MULTIPLIER,
        "advanced": ADVANCED_CALORIE_MULTIPLIER,
    }

    # Training Plan Configuration
    # Day every plan template is moved to, only its time of day is kept
    PLAN_EPOCH_DATE: str = os.getenv("PLAN_EPOCH_DATE", "0001-01-01")
    DEFAULT_PLAN_EPOCH: date = date(1, 1, 1)

    @classmethod
    def get_calorie_multiplier(cls, level) -> float:
        """Get calorie multiplier for a user level (enum member or its value)."""
        key = getattr(level, "value", level)
        return cls.CALORIE_MULTIPLIERS.get(str(key).lower(), 1.0)

    @classmethod
    def get_plan_epoch(cls) -> date:
        """Parse and return the day training plan templates are normalized to."""
        if not cls.PLAN_EPOCH_DATE:
            return cls.DEFAULT_PLAN_EPOCH

        try:
            return datetime.strptime(cls.PLAN_EPOCH_DATE.strip(), "%Y-%m-%d").date()
        except ValueError:
            return cls.DEFAULT_PLAN_EPOCH


config = Config()
