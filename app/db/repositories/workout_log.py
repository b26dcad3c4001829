"""
Workout log repository.

Handles database operations for :class:`WorkoutLog`.
Includes the week-window query used by standings and settlement.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from app.models.workout_log import WorkoutLog


class WorkoutLogRepository:
    """Repository for WorkoutLog database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: WorkoutLog) -> WorkoutLog:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, entry_id: int) -> Optional[WorkoutLog]:
        return self.session.get(WorkoutLog, entry_id)

    def get_all(self, partner_id: Optional[int] = None, limit: int = 100) -> list[WorkoutLog]:
        """Newest first, optionally restricted to one partner."""
        statement = select(WorkoutLog)
        if partner_id is not None:
            statement = statement.where(WorkoutLog.partner_id == partner_id)
        statement = statement.order_by(WorkoutLog.logged_at.desc(), WorkoutLog.id.desc()).limit(limit)
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # Week window query
    # ------------------------------------------------------------------

    def get_in_window(self, start: datetime.datetime, end: datetime.datetime, ) -> list[WorkoutLog]:
        """Logs with ``start <= logged_at < end`` for every partner."""
        statement = (select(WorkoutLog).where(WorkoutLog.logged_at >= start, WorkoutLog.logged_at < end, ).order_by(
            WorkoutLog.logged_at, WorkoutLog.id))
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def update(self, entry: WorkoutLog) -> WorkoutLog:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete(self, entry_id: int) -> bool:
        entry = self.get_by_id(entry_id)
        if entry:
            self.session.delete(entry)
            self.session.commit()
            return True
        return False
