"""
Partner API schemas.

Pydantic models for partner profile request/response validation.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from app.models.partner import FitnessLevel, Sex, WeightUnit

_NON_NULLABLE = ("name", "color", "weekly_goal", "calorie_goal", "weight_unit")


# Shared properties
class PartnerBase(BaseModel):
    """Base partner schema with common fields."""
    name: str = Field(..., min_length=1, max_length=100)
    color: str = Field("blue", max_length=20)
    weekly_goal: int = Field(5, ge=1, le=14, description="Target workouts per week")
    calorie_goal: int = Field(2000, ge=0, description="Daily calorie goal")
    goal: Optional[str] = Field("general fitness", max_length=255)

    age: Optional[int] = Field(None, ge=0, le=120)
    height_cm: Optional[int] = Field(None, ge=50, le=260)
    weight: Optional[float] = Field(None, ge=10, le=1000, description="Body weight in ``weight_unit``")
    weight_unit: WeightUnit = WeightUnit.KG
    sex: Optional[Sex] = None
    fitness_level: Optional[FitnessLevel] = FitnessLevel.INTERMEDIATE


# Request schemas
class PartnerCreate(PartnerBase):
    """Schema for creating a partner."""


class PartnerUpdate(BaseModel):
    """Schema for a partial profile update.  Only supplied fields change.

    Optional biometrics may be cleared with an explicit ``null``; the
    columns every partner must have may not.
    """
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    color: Optional[str] = Field(None, max_length=20)
    weekly_goal: Optional[int] = Field(None, ge=1, le=14)
    calorie_goal: Optional[int] = Field(None, ge=0)
    goal: Optional[str] = Field(None, max_length=255)

    age: Optional[int] = Field(None, ge=0, le=120)
    height_cm: Optional[int] = Field(None, ge=50, le=260)
    weight: Optional[float] = Field(None, ge=10, le=1000)
    weight_unit: Optional[WeightUnit] = None
    sex: Optional[Sex] = None
    fitness_level: Optional[FitnessLevel] = None

    @model_validator(mode="after")
    def reject_null_required_fields(self) -> "PartnerUpdate":
        """Refuse an explicit ``null`` for a column that cannot be empty."""
        cleared = sorted(f for f in _NON_NULLABLE if f in self.model_fields_set and getattr(self, f) is None)
        if cleared:
            raise ValueError(f"These fields cannot be null: {', '.join(cleared)}")
        return self


# Response schemas
class PartnerResponse(PartnerBase):
    """Schema for partner data in API responses."""
    id: int
    streak: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True  # Allows creation from SQLModel objects
