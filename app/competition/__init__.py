"""Competition core: effort normaliser, weekly standings, settlement."""

from app.competition.effort import (DEFAULT_EFFORT_CONFIG, EffortConfig, InvalidWorkoutError, ProfileSnapshot,
                                    compute_effort_score, )
from app.competition.settlement import finalize_week
from app.competition.standings import compute_weekly_standings, week_window

__all__ = [
    "DEFAULT_EFFORT_CONFIG",
    "EffortConfig",
    "InvalidWorkoutError",
    "ProfileSnapshot",
    "compute_effort_score",
    "compute_weekly_standings",
    "finalize_week",
    "week_window",
]
