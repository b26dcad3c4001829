"""Pydantic schemas for request/response validation."""

from app.schemas.partner import PartnerCreate, PartnerResponse, PartnerUpdate
from app.schemas.workout_log import WorkoutLogCreate, WorkoutLogResponse, WorkoutLogUpdate
from app.schemas.competition import (
    PartnerStanding,
    SettlementResponse,
    SettlementStatus,
    WeeklyResultResponse,
    WeeklyStandingsResponse,
)

__all__ = [
    "PartnerCreate",
    "PartnerResponse",
    "PartnerUpdate",
    "WorkoutLogCreate",
    "WorkoutLogResponse",
    "WorkoutLogUpdate",
    "PartnerStanding",
    "SettlementResponse",
    "SettlementStatus",
    "WeeklyResultResponse",
    "WeeklyStandingsResponse",
]
