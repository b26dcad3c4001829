"""
Partner database model.

A partner is one of the two people sharing goals.  The biometric part of
the row (weight, sex, age, fitness level) is the profile consumed by the
effort normaliser; it can be edited at any time without touching the
effort scores already frozen on workout logs.
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import NaiveDatetime
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


class Sex(str, Enum):
    """Biological sex, used only as a physiological multiplier."""
    MALE = "male"
    FEMALE = "female"


class FitnessLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class WeightUnit(str, Enum):
    KG = "kg"
    LB = "lb"


class Partner(SQLModel, table=True):
    """A person taking part in the weekly competition."""

    __tablename__ = "partners"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=100)
    color: str = Field(default="blue", max_length=20)

    # Goals
    weekly_goal: int = Field(default=5, ge=1, le=14)
    calorie_goal: int = Field(default=2000, ge=0)
    streak: int = Field(default=0, ge=0)
    goal: Optional[str] = Field(default="general fitness", max_length=255)

    # Biometric profile (all optional, the normaliser falls back to defaults)
    age: Optional[int] = Field(default=None, ge=0, le=120)
    height_cm: Optional[int] = Field(default=None)
    weight: Optional[float] = Field(default=None)
    weight_unit: WeightUnit = Field(default=WeightUnit.KG)
    sex: Optional[Sex] = Field(default=None)
    fitness_level: Optional[FitnessLevel] = Field(default=FitnessLevel.INTERMEDIATE)

    # Timestamps
    created_at: NaiveDatetime = Field(default_factory=datetime.datetime.utcnow, sa_type=DateTime(timezone=False))
    updated_at: NaiveDatetime = Field(default_factory=datetime.datetime.utcnow, sa_type=DateTime(timezone=False))
