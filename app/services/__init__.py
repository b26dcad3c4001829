"""Business logic services."""

from app.services.partner_service import PartnerService
from app.services.workout_log_service import WorkoutLogService
from app.services.weekly_result_service import WeeklyResultService

__all__ = [
    "PartnerService",
    "WorkoutLogService",
    "WeeklyResultService",
]
