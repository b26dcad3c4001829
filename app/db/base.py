"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.partner import Partner  # noqa: F401
from app.models.workout_log import WorkoutLog  # noqa: F401
from app.models.weekly_result import WeeklyResult  # noqa: F401
