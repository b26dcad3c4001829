"""Database repositories."""

from app.db.repositories.partner import PartnerRepository
from app.db.repositories.workout_log import WorkoutLogRepository
from app.db.repositories.weekly_result import WeeklyResultRepository

__all__ = [
    "PartnerRepository",
    "WorkoutLogRepository",
    "WeeklyResultRepository",
]
