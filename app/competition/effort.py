"""
Effort normaliser — fairness-adjusted score for a single workout.

Raw calories are not comparable across two people: a heavier person burns
more for the same movement, and age, sex and training status shift how
hard a given burn actually is.  The effort score corrects for those
factors so that partners can compete on a level field.

Formula
-------
::

    weight_factor   = baseline_kg / weight_kg            (weight defaults to 70 kg)
    normalized      = calories × weight_factor
    sex_mult        = 1.15 if female else 1.0
    fitness_mult    = beginner 0.85 | intermediate 1.0 | advanced 1.15
    age_mult        = 1 + max(0, (age − 25) × 0.005)
    duration_mult   = 1 + log10(max(duration, 1)) × 0.1

    effort_score    = round(normalized × sex_mult × fitness_mult × age_mult × duration_mult)

The constants are empirical tuning values.  Scores are frozen onto each
workout log at write time, so changing them would only affect workouts
written afterwards; they are kept verbatim for that reason.

The normaliser is pure: no I/O, no hidden state.  Missing profile fields
never raise, they fall back to the documented defaults.
"""

from __future__ import annotations

import math
from typing import Optional

from pydantic import BaseModel, Field

from app.models.partner import FitnessLevel, Partner, Sex, WeightUnit

LB_TO_KG = 0.45359237

# Input ceilings, so the integer score column can never overflow
MAX_CALORIES_BURNED = 100_000
MAX_DURATION_MINUTES = 24 * 60

# ======================================================================
# Configuration
# ======================================================================

_DEFAULT_FITNESS_MULTIPLIERS: dict[str, float] = {
    FitnessLevel.BEGINNER.value: 0.85,
    FitnessLevel.INTERMEDIATE.value: 1.0,
    FitnessLevel.ADVANCED.value: 1.15,
}


class EffortConfig(BaseModel):
    """Tuning constants of the effort formula.

    Injectable for testing; production code always uses
    :data:`DEFAULT_EFFORT_CONFIG`.
    """

    baseline_weight_kg: float = Field(75.0, gt=0)
    default_weight_kg: float = Field(70.0, gt=0)
    female_multiplier: float = 1.15
    fitness_multipliers: dict[str, float] = Field(default_factory=lambda: dict(_DEFAULT_FITNESS_MULTIPLIERS))
    age_bonus_from: int = 25
    age_bonus_per_year: float = 0.005
    duration_log_weight: float = 0.1


DEFAULT_EFFORT_CONFIG = EffortConfig()


class InvalidWorkoutError(ValueError):
    """Raised for workout inputs that cannot be scored (e.g. negative calories)."""


# ======================================================================
# Inputs / outputs
# ======================================================================


class ProfileSnapshot(BaseModel):
    """Biometric attributes of a partner at the moment of scoring."""

    weight: Optional[float] = None
    weight_unit: WeightUnit = WeightUnit.KG
    sex: Optional[Sex] = None
    age: Optional[int] = None
    fitness_level: Optional[FitnessLevel] = None

    @classmethod
    def from_partner(cls, partner: Partner) -> ProfileSnapshot:
        return cls(weight=partner.weight, weight_unit=partner.weight_unit or WeightUnit.KG, sex=partner.sex,
                   age=partner.age, fitness_level=partner.fitness_level, )

    def weight_kg(self, default_kg: float) -> float:
        """Weight in kilograms; non-positive or missing weight yields *default_kg*."""
        if self.weight is None or self.weight <= 0:
            return default_kg
        if self.weight_unit == WeightUnit.LB:
            return self.weight * LB_TO_KG
        return float(self.weight)


class EffortBreakdown(BaseModel):
    """Every intermediate factor of one effort computation."""

    weight_kg: float
    weight_factor: float
    normalized_calories: float
    sex_multiplier: float
    fitness_multiplier: float
    age_multiplier: float
    duration_multiplier: float
    score: int


# ======================================================================
# Individual factors
# ======================================================================


def _sex_multiplier(sex: Optional[Sex], cfg: EffortConfig) -> float:
    return cfg.female_multiplier if sex == Sex.FEMALE else 1.0


def _fitness_multiplier(level: Optional[FitnessLevel], cfg: EffortConfig) -> float:
    if level is None:
        return 1.0
    return cfg.fitness_multipliers.get(FitnessLevel(level).value, 1.0)


def _age_multiplier(age: Optional[int], cfg: EffortConfig) -> float:
    if age is None:
        return 1.0
    return 1.0 + max(0.0, (age - cfg.age_bonus_from) * cfg.age_bonus_per_year)


def _duration_multiplier(duration_minutes: int, cfg: EffortConfig) -> float:
    return 1.0 + math.log10(max(duration_minutes, 1)) * cfg.duration_log_weight


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


# ======================================================================
# Main entry points
# ======================================================================


def compute_effort_breakdown(calories_burned: int, duration_minutes: int, profile: Optional[ProfileSnapshot] = None,
                             config: Optional[EffortConfig] = None, ) -> EffortBreakdown:
    """Compute the effort score and all of its factors.

    Args:
        calories_burned: Raw calories, must be >= 0.
        duration_minutes: Session length; values below 1 are clamped to 1.
        profile: Partner profile snapshot (``None`` means all defaults).
        config: Optional :class:`EffortConfig` override.

    Raises:
        InvalidWorkoutError: If ``calories_burned`` is negative or above
            :data:`MAX_CALORIES_BURNED`, or ``duration_minutes`` is missing
            or above :data:`MAX_DURATION_MINUTES`.
    """
    if calories_burned is None or calories_burned < 0:
        raise InvalidWorkoutError(f"calories_burned must be >= 0, got {calories_burned}")
    if calories_burned > MAX_CALORIES_BURNED:
        raise InvalidWorkoutError(f"calories_burned must be <= {MAX_CALORIES_BURNED}, got {calories_burned}")
    if duration_minutes is None:
        raise InvalidWorkoutError("duration_minutes is required")
    if duration_minutes > MAX_DURATION_MINUTES:
        raise InvalidWorkoutError(f"duration_minutes must be <= {MAX_DURATION_MINUTES}, got {duration_minutes}")

    cfg = config or DEFAULT_EFFORT_CONFIG
    prof = profile or ProfileSnapshot()

    weight_kg = prof.weight_kg(cfg.default_weight_kg)
    weight_factor = cfg.baseline_weight_kg / weight_kg
    normalized = calories_burned * weight_factor

    sex_mult = _sex_multiplier(prof.sex, cfg)
    fitness_mult = _fitness_multiplier(prof.fitness_level, cfg)
    age_mult = _age_multiplier(prof.age, cfg)
    duration_mult = _duration_multiplier(duration_minutes, cfg)

    score = _round_half_up(normalized * sex_mult * fitness_mult * age_mult * duration_mult)

    return EffortBreakdown(weight_kg=weight_kg, weight_factor=weight_factor, normalized_calories=normalized,
                           sex_multiplier=sex_mult, fitness_multiplier=fitness_mult, age_multiplier=age_mult,
                           duration_multiplier=duration_mult, score=score, )


def compute_effort_score(calories_burned: int, duration_minutes: int, profile: Optional[ProfileSnapshot] = None,
                         config: Optional[EffortConfig] = None, ) -> int:
    """Return only the integer effort score.  See :func:`compute_effort_breakdown`."""
    return compute_effort_breakdown(calories_burned, duration_minutes, profile, config).score
