"""
Settlement — closes the most recently completed week, exactly once.

States per week: **open** (week ended, no result row) → **settled**
(result row exists).  The transition is one-way; a settled week is never
recomputed, even if workouts of that week are later edited or deleted.

Algorithm
---------
1. Target window = the Sunday-to-Saturday week strictly before the week
   containing "now".  Callers cannot choose another week.
2. If a result for that ``week_start`` exists → ``already_settled``, no
   writes.
3. Aggregate effort per partner for the target window (same rules as the
   live standings).
4. All totals zero → ``nothing_to_settle``, no row.  "Nobody trained" is
   kept distinct from "tied at zero".
5. Top two equal → tie (``winner_id=None``); otherwise the top scorer
   wins.  The runner-up score is 0 when there is only one partner.
6. Insert.  The unique constraint on ``week_start`` is the race guard: a
   concurrent caller that loses the insert rolls back and reports
   ``already_settled`` instead of failing.

Store failures (``OperationalError`` and friends) propagate unchanged.
Nothing is written before step 6, so a retry is always safe.
"""

from __future__ import annotations

import datetime
from typing import Optional

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.competition.standings import aggregate_week, previous_week_window
from app.core.clock import local_now, to_local_naive
from app.db.repositories.partner import PartnerRepository
from app.db.repositories.weekly_result import WeeklyResultRepository
from app.db.repositories.workout_log import WorkoutLogRepository
from app.models.weekly_result import WeeklyResult
from app.schemas.competition import (PartnerStanding, SettlementResponse, SettlementStatus, WeeklyResultResponse, )


def build_weekly_result(week_start: datetime.date, standings: list[PartnerStanding], ) -> Optional[WeeklyResult]:
    """Turn sorted standings into an (unsaved) :class:`WeeklyResult`.

    Returns ``None`` when every total is zero.
    """
    if not standings or all(s.total_score == 0 for s in standings):
        return None

    top = standings[0]
    runner_up_score = standings[1].total_score if len(standings) > 1 else 0
    is_tie = len(standings) > 1 and top.total_score == runner_up_score

    return WeeklyResult(week_start=week_start, winner_id=None if is_tie else top.partner_id,
                        winner_score=top.total_score, runner_up_score=runner_up_score, is_tie=is_tie, )


def _already_settled(week_start: datetime.date, existing: WeeklyResult) -> SettlementResponse:
    return SettlementResponse(status=SettlementStatus.ALREADY_SETTLED, week_start=week_start,
                              result=WeeklyResultResponse.model_validate(existing), )


def finalize_week(session: Session, now: Optional[datetime.datetime] = None) -> SettlementResponse:
    """Settle the week immediately preceding the current one.

    Args:
        session: Database session.
        now: Clock reading (defaults to now).  Aware values are converted
            to the competition zone first.  It only locates the current
            week; the settled week is always the one before it.

    Returns:
        :class:`SettlementResponse` with status ``settled``,
        ``already_settled`` or ``nothing_to_settle``.
    """
    moment = to_local_naive(now) if now is not None else local_now()
    start, end = previous_week_window(moment)
    week_start = start.date()

    results = WeeklyResultRepository(session)

    existing = results.get_by_week_start(week_start)
    if existing is not None:
        logger.info(f"Week {week_start} already settled (result id={existing.id}), nothing written")
        return _already_settled(week_start, existing)

    observations = WorkoutLogRepository(session).get_in_window(start, end)
    participants = PartnerRepository(session).get_all_ids()
    standings = aggregate_week(observations, start, end, participants)

    candidate = build_weekly_result(week_start, standings)
    if candidate is None:
        logger.info(f"Week {week_start} had no activity, no result recorded")
        return SettlementResponse(status=SettlementStatus.NOTHING_TO_SETTLE, week_start=week_start)

    try:
        created = results.create(candidate)
    except IntegrityError:
        session.rollback()
        existing = results.get_by_week_start(week_start)
        if existing is None:
            raise
        logger.warning(f"Settlement race on week {week_start}: another caller settled it first")
        return _already_settled(week_start, existing)

    if created.is_tie:
        logger.info(f"Week {week_start} settled as a tie at {created.winner_score}")
    else:
        logger.info(f"Week {week_start} settled: partner {created.winner_id} wins "
                    f"{created.winner_score} to {created.runner_up_score}")

    return SettlementResponse(status=SettlementStatus.SETTLED, week_start=week_start,
                              result=WeeklyResultResponse.model_validate(created), )
