"""
Weekly competition schemas.

``WeeklyStandingsResponse`` is a live, recomputed-on-read view of the week
containing the reference moment.  ``WeeklyResultResponse`` mirrors the
immutable ledger row written by settlement.
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class PartnerStanding(BaseModel):
    """Accumulated effort of one partner within a week window."""

    partner_id: int
    total_score: int = Field(..., ge=0, description="Sum of frozen effort scores in the window")
    workout_count: int = Field(..., ge=0, description="Number of workouts in the window")


class WeeklyStandingsResponse(BaseModel):
    """Ranked standings for one Sunday-to-Saturday window.

    ``standings`` is sorted by ``total_score`` descending; order among
    equal scores is not meaningful.  Use ``leader_ids`` / ``is_tie`` to
    detect a tie at the top.
    """

    week_start: datetime.datetime = Field(..., description="Sunday 00:00 (inclusive)")
    week_end: datetime.datetime = Field(..., description="Following Sunday 00:00 (exclusive)")
    standings: list[PartnerStanding]
    leader_ids: list[int] = Field(default_factory=list, description="Partners sharing the top non-zero score")
    is_tie: bool = Field(False, description="True when more than one partner shares the top score")


class WeeklyResultResponse(BaseModel):
    """A settled week."""

    id: int
    week_start: datetime.date
    winner_id: Optional[int] = Field(None, description="None when the week ended in a tie")
    winner_score: int
    runner_up_score: int
    is_tie: bool
    created_at: datetime.datetime

    class Config:
        from_attributes = True


class SettlementStatus(str, Enum):
    SETTLED = "settled"
    ALREADY_SETTLED = "already_settled"
    NOTHING_TO_SETTLE = "nothing_to_settle"


class SettlementResponse(BaseModel):
    """Outcome of ``finalize_week``.

    ``result`` is populated for ``settled`` and ``already_settled``.
    """

    status: SettlementStatus
    week_start: datetime.date
    result: Optional[WeeklyResultResponse] = None
