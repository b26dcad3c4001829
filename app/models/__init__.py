"""SQLModel database models."""

from app.models.partner import FitnessLevel, Partner, Sex, WeightUnit
from app.models.workout_log import WorkoutLog
from app.models.weekly_result import WeeklyResult

__all__ = [
    "FitnessLevel",
    "Partner",
    "Sex",
    "WeightUnit",
    "WorkoutLog",
    "WeeklyResult",
]
