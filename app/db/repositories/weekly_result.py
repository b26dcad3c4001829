"""
Weekly result repository.

Insert-only access to the settled-weeks ledger.  There is deliberately
no ``update`` or ``delete``.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from app.models.weekly_result import WeeklyResult


class WeeklyResultRepository:
    """Repository for WeeklyResult database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, result: WeeklyResult) -> WeeklyResult:
        """Insert *result* in its own commit.

        Raises ``sqlalchemy.exc.IntegrityError`` when a row for the same
        ``week_start`` already exists.
        """
        self.session.add(result)
        self.session.commit()
        self.session.refresh(result)
        return result

    def get_by_week_start(self, week_start: datetime.date) -> Optional[WeeklyResult]:
        statement = select(WeeklyResult).where(WeeklyResult.week_start == week_start)
        return self.session.exec(statement).first()

    def get_all(self, skip: int = 0, limit: int = 52) -> list[WeeklyResult]:
        statement = select(WeeklyResult).order_by(WeeklyResult.week_start.desc()).offset(skip).limit(limit)
        return list(self.session.exec(statement).all())
