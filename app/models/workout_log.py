"""
Workout log database model.

Stores the raw observation (calories, duration, timestamp) together with
the effort score computed when the row was written.  The score is frozen:
read paths never recompute it, only an edit of calories or duration does.
"""

import datetime
from typing import Optional

from pydantic import NaiveDatetime
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


class WorkoutLog(SQLModel, table=True):
    """A single logged workout."""

    __tablename__ = "workout_logs"

    id: Optional[int] = Field(default=None, primary_key=True)
    partner_id: int = Field(foreign_key="partners.id", nullable=False, index=True)
    activity_name: str = Field(nullable=False, max_length=255)

    # Raw inputs
    calories_burned: int = Field(nullable=False, ge=0)
    duration_minutes: int = Field(nullable=False, ge=1)

    # Naive wall-clock time in the competition zone
    logged_at: NaiveDatetime = Field(nullable=False, index=True, sa_type=DateTime(timezone=False))

    # Derived, frozen at write time
    effort_score: int = Field(default=0, nullable=False, ge=0)

    # Timestamps
    created_at: NaiveDatetime = Field(default_factory=datetime.datetime.utcnow, sa_type=DateTime(timezone=False))
    updated_at: NaiveDatetime = Field(default_factory=datetime.datetime.utcnow, sa_type=DateTime(timezone=False))
