"""
Workout log service.

Computes the effort score with the partner's current profile when a
workout is logged, and again only when calories or duration are edited.
The score is then frozen on the row: no read path recomputes it.
"""

import datetime
from typing import Optional

from fastapi import HTTPException, status
from loguru import logger
from sqlmodel import Session

from app.competition.effort import InvalidWorkoutError, ProfileSnapshot, compute_effort_score
from app.core.clock import local_now, to_local_naive
from app.db.repositories.workout_log import WorkoutLogRepository
from app.models.partner import Partner
from app.models.workout_log import WorkoutLog
from app.schemas.workout_log import WorkoutLogCreate, WorkoutLogUpdate
from app.services.partner_service import PartnerService


class WorkoutLogService:
    """Service for workout log business logic."""

    def __init__(self, session: Session):
        self.repository = WorkoutLogRepository(session)
        self.partners = PartnerService(session)

    def create(self, data: WorkoutLogCreate) -> WorkoutLog:
        # 1. Resolve the partner's current profile
        partner = self.partners.get(data.partner_id)

        # 2. Score the workout
        effort = self._score(partner, data.calories_burned, data.duration_minutes)

        # 3. Every logged workout extends the partner's streak; committed
        #    together with the log below
        partner.streak += 1
        partner.updated_at = datetime.datetime.utcnow()

        # 4. Persist with the frozen score
        logged_at = to_local_naive(data.logged_at) if data.logged_at else local_now()
        entry = WorkoutLog(partner_id=partner.id, activity_name=data.activity_name,
                           calories_burned=data.calories_burned, duration_minutes=data.duration_minutes,
                           logged_at=logged_at, effort_score=effort, )
        entry = self.repository.create(entry)

        logger.info(f"Partner {partner.id} logged workout {entry.id} "
                    f"({entry.calories_burned} kcal / {entry.duration_minutes} min) effort={entry.effort_score}")
        return entry

    def get(self, entry_id: int) -> WorkoutLog:
        entry = self.repository.get_by_id(entry_id)
        if not entry:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout log not found", )
        return entry

    def list_logs(self, partner_id: Optional[int] = None, limit: int = 100) -> list[WorkoutLog]:
        if partner_id is not None:
            self.partners.get(partner_id)
        return self.repository.get_all(partner_id=partner_id, limit=limit)

    def update(self, entry_id: int, data: WorkoutLogUpdate) -> WorkoutLog:
        entry = self.get(entry_id)

        if data.activity_name is not None:
            entry.activity_name = data.activity_name
        if data.logged_at is not None:
            entry.logged_at = to_local_naive(data.logged_at)

        inputs_changed = False
        if data.calories_burned is not None and data.calories_burned != entry.calories_burned:
            entry.calories_burned = data.calories_burned
            inputs_changed = True
        if data.duration_minutes is not None and data.duration_minutes != entry.duration_minutes:
            entry.duration_minutes = data.duration_minutes
            inputs_changed = True

        # Recompute only on an explicit change of the scored inputs,
        # using the profile as it is now
        if inputs_changed:
            partner = self.partners.get(entry.partner_id)
            previous = entry.effort_score
            entry.effort_score = self._score(partner, entry.calories_burned, entry.duration_minutes)
            logger.info(f"Recomputed effort for workout {entry.id}: {previous} -> {entry.effort_score}")

        entry.updated_at = datetime.datetime.utcnow()
        return self.repository.update(entry)

    def delete(self, entry_id: int) -> None:
        self.get(entry_id)
        self.repository.delete(entry_id)
        logger.info(f"Deleted workout log {entry_id}")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _score(partner: Partner, calories_burned: int, duration_minutes: int) -> int:
        try:
            return compute_effort_score(calories_burned, duration_minutes, ProfileSnapshot.from_partner(partner))
        except InvalidWorkoutError as e:
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=f"Invalid workout: {e}", )
