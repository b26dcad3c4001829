"""
Weekly result database model.

Immutable ledger of settled weeks.  One row per ``week_start`` (enforced
by a unique constraint), never updated once written.
"""

import datetime
from typing import Optional

from pydantic import NaiveDatetime
from sqlalchemy import DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel


class WeeklyResult(SQLModel, table=True):
    """Outcome of a completed Sunday-to-Saturday week.

    ``winner_id`` is ``None`` when the week ended in a tie.
    """

    __tablename__ = "weekly_results"
    __table_args__ = (UniqueConstraint("week_start", name="uq_weekly_result_week_start"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    week_start: datetime.date = Field(nullable=False, index=True)

    winner_id: Optional[int] = Field(default=None, foreign_key="partners.id", nullable=True)
    winner_score: int = Field(nullable=False, ge=0)
    runner_up_score: int = Field(nullable=False, ge=0)
    is_tie: bool = Field(default=False, nullable=False)

    created_at: NaiveDatetime = Field(default_factory=datetime.datetime.utcnow, sa_type=DateTime(timezone=False))
