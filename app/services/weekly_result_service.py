"""
Weekly result service.

Read access to the settled-weeks ledger.  Results are only ever written
by :func:`app.competition.settlement.finalize_week`.
"""

import datetime

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.weekly_result import WeeklyResultRepository
from app.models.weekly_result import WeeklyResult


class WeeklyResultService:
    """Service for weekly result lookups."""

    def __init__(self, session: Session):
        self.repository = WeeklyResultRepository(session)

    def list_results(self, skip: int = 0, limit: int = 52) -> list[WeeklyResult]:
        return self.repository.get_all(skip=skip, limit=limit)

    def get_by_week_start(self, week_start: datetime.date) -> WeeklyResult:
        result = self.repository.get_by_week_start(week_start)
        if not result:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Week {week_start} is not settled", )
        return result
