"""
Workout log endpoints.

Logging a workout computes and freezes its effort score.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.db.session import get_db
from app.schemas.workout_log import WorkoutLogCreate, WorkoutLogResponse, WorkoutLogUpdate
from app.services.workout_log_service import WorkoutLogService

router = APIRouter()


@router.post("", summary="Log a workout.", response_model=WorkoutLogResponse, status_code=status.HTTP_201_CREATED, )
def create_workout(data: WorkoutLogCreate, db: Session = Depends(get_db)):
    service = WorkoutLogService(db)
    return service.create(data)


@router.get("", summary="List workouts, newest first.", response_model=list[WorkoutLogResponse], )
def list_workouts(partner_id: Optional[int] = Query(None, description="Restrict to one partner"),
                  limit: int = Query(100, ge=1, le=500), db: Session = Depends(get_db), ):
    service = WorkoutLogService(db)
    return service.list_logs(partner_id=partner_id, limit=limit)


@router.get("/{log_id}", summary="Get a workout.", response_model=WorkoutLogResponse, )
def get_workout(log_id: int, db: Session = Depends(get_db)):
    service = WorkoutLogService(db)
    return service.get(log_id)


@router.patch("/{log_id}", summary="Edit a workout.", response_model=WorkoutLogResponse, )
def update_workout(log_id: int, data: WorkoutLogUpdate, db: Session = Depends(get_db)):
    service = WorkoutLogService(db)
    return service.update(log_id, data)


@router.delete("/{log_id}", summary="Delete a workout.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_workout(log_id: int, db: Session = Depends(get_db)):
    service = WorkoutLogService(db)
    service.delete(log_id)
