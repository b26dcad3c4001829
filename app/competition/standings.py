"""
Weekly aggregation — live standings.

Weeks run Sunday to Saturday in the competition time zone::

    week_start = most recent Sunday 00:00 on or before the moment
    week_end   = week_start + 7 days            (exclusive)

A workout at Saturday 23:59:59 belongs to the week it closes; one at the
following Sunday 00:00:00 opens the next week.

Standings are derived on every read from the frozen per-workout effort
scores.  Nothing here is persisted, and nothing here recomputes an
effort score.
"""

from __future__ import annotations

import datetime
from collections import defaultdict
from typing import Iterable, Optional

from sqlmodel import Session

from app.core.clock import local_now
from app.db.repositories.partner import PartnerRepository
from app.db.repositories.workout_log import WorkoutLogRepository
from app.models.workout_log import WorkoutLog
from app.schemas.competition import PartnerStanding, WeeklyStandingsResponse

WEEK = datetime.timedelta(days=7)


# ======================================================================
# Week windows
# ======================================================================


def week_start_for(moment: datetime.datetime) -> datetime.datetime:
    """Midnight of the most recent Sunday on or before *moment*."""
    # Python weekday(): Monday=0 ... Sunday=6
    days_since_sunday = (moment.weekday() + 1) % 7
    day = moment.date() - datetime.timedelta(days=days_since_sunday)
    return datetime.datetime.combine(day, datetime.time.min)


def week_window(moment: datetime.datetime) -> tuple[datetime.datetime, datetime.datetime]:
    """``[start, end)`` of the week containing *moment*."""
    start = week_start_for(moment)
    return start, start + WEEK


def previous_week_window(moment: datetime.datetime) -> tuple[datetime.datetime, datetime.datetime]:
    """``[start, end)`` of the last complete week strictly before the one containing *moment*."""
    current_start = week_start_for(moment)
    return current_start - WEEK, current_start


# ======================================================================
# Aggregation
# ======================================================================


def aggregate_week(observations: Iterable[WorkoutLog], start: datetime.datetime, end: datetime.datetime,
                   participants: Iterable[int] = (), ) -> list[PartnerStanding]:
    """Sum effort scores per partner for observations in ``[start, end)``.

    Every partner appearing in *observations* or *participants* gets an
    entry, with a zero total when none of their workouts fall in the
    window.  The list is sorted by total score, highest first.
    """
    totals: dict[int, int] = defaultdict(int)
    counts: dict[int, int] = defaultdict(int)

    for partner_id in participants:
        totals.setdefault(partner_id, 0)

    for obs in observations:
        totals.setdefault(obs.partner_id, 0)
        if start <= obs.logged_at < end:
            totals[obs.partner_id] += obs.effort_score
            counts[obs.partner_id] += 1

    standings = [PartnerStanding(partner_id=pid, total_score=totals[pid], workout_count=counts[pid]) for pid in totals]
    standings.sort(key=lambda s: (-s.total_score, s.partner_id))
    return standings


def leader_ids(standings: list[PartnerStanding]) -> list[int]:
    """Partners sharing the top score.  Empty when nobody has scored."""
    if not standings or standings[0].total_score == 0:
        return []
    top = standings[0].total_score
    return [s.partner_id for s in standings if s.total_score == top]


# ======================================================================
# Main entry point
# ======================================================================


def compute_weekly_standings(session: Session, as_of: Optional[datetime.datetime] = None,
                             ) -> WeeklyStandingsResponse:
    """Live standings for the week containing *as_of*.

    Args:
        session: Database session.
        as_of: Naive competition-zone reference moment (defaults to now).

    Returns:
        :class:`WeeklyStandingsResponse`.  Read-only and idempotent.
    """
    moment = as_of or local_now()
    start, end = week_window(moment)

    observations = WorkoutLogRepository(session).get_in_window(start, end)
    participants = PartnerRepository(session).get_all_ids()

    standings = aggregate_week(observations, start, end, participants)
    leaders = leader_ids(standings)

    return WeeklyStandingsResponse(week_start=start, week_end=end, standings=standings, leader_ids=leaders,
                                   is_tie=len(leaders) > 1, )
