"""Scheduling: overlap checks, training plans and user ledgers."""

from .overlap import overlaps
from .training_plan import PlanEntry, TrainingPlan
from .ledger import UserLedger

__all__ = ["overlaps", "PlanEntry", "TrainingPlan", "UserLedger"]
