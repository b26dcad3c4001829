"""
Competition endpoints — live standings, weekly settlement, results history.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.competition.settlement import finalize_week
from app.competition.standings import compute_weekly_standings
from app.core.clock import to_local_naive
from app.db.session import get_db
from app.schemas.competition import SettlementResponse, WeeklyResultResponse, WeeklyStandingsResponse
from app.services.weekly_result_service import WeeklyResultService

router = APIRouter()


@router.get(
    "/standings",
    summary="Get live standings for the current week.",
    response_model=WeeklyStandingsResponse,
)
def get_standings(
    as_of: Optional[datetime.datetime] = Query(
        None, description="Reference moment (defaults to now)"
    ),
    db: Session = Depends(get_db),
):
    ref = to_local_naive(as_of) if as_of else None
    return compute_weekly_standings(db, ref)


@router.post(
    "/finalize",
    summary="Settle the most recently completed week.",
    response_model=SettlementResponse,
)
def finalize_previous_week(db: Session = Depends(get_db)):
    return finalize_week(db)


@router.get(
    "/results",
    summary="List settled weeks, newest first.",
    response_model=list[WeeklyResultResponse],
)
def list_results(
    skip: int = Query(0, ge=0),
    limit: int = Query(52, ge=1, le=520),
    db: Session = Depends(get_db),
):
    return WeeklyResultService(db).list_results(skip=skip, limit=limit)


@router.get(
    "/results/{week_start}",
    summary="Get the result of one settled week.",
    response_model=WeeklyResultResponse,
)
def get_result(week_start: datetime.date, db: Session = Depends(get_db)):
    return WeeklyResultService(db).get_by_week_start(week_start)
