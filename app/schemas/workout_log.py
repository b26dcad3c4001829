"""
Workout log API schemas.

``effort_score`` is never accepted from clients; it is computed by the
server and frozen on the stored row.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.competition.effort import MAX_CALORIES_BURNED, MAX_DURATION_MINUTES


class WorkoutLogCreate(BaseModel):
    """Schema for logging a workout."""

    partner_id: int = Field(..., ge=1, description="Partner who did the workout")
    activity_name: str = Field(..., min_length=1, max_length=255, description="e.g. 'Morning run'")
    calories_burned: int = Field(..., ge=0, le=MAX_CALORIES_BURNED)
    duration_minutes: int = Field(..., ge=1, le=MAX_DURATION_MINUTES)
    logged_at: Optional[datetime.datetime] = Field(
        None, description="When the workout happened (defaults to now)"
    )


class WorkoutLogUpdate(BaseModel):
    """Schema for editing a workout.

    Changing ``calories_burned`` or ``duration_minutes`` recomputes the
    effort score with the partner's current profile.
    """

    activity_name: Optional[str] = Field(None, min_length=1, max_length=255)
    calories_burned: Optional[int] = Field(None, ge=0, le=MAX_CALORIES_BURNED)
    duration_minutes: Optional[int] = Field(None, ge=1, le=MAX_DURATION_MINUTES)
    logged_at: Optional[datetime.datetime] = None


class WorkoutLogResponse(BaseModel):
    """Schema for a workout log in API responses."""

    id: int
    partner_id: int
    activity_name: str
    calories_burned: int
    duration_minutes: int
    logged_at: datetime.datetime
    effort_score: int
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True
