"""
Wall-clock helpers.

Workout timestamps are stored as naive datetimes expressed in the
configured competition time zone (``settings.TIMEZONE``), so that week
boundaries ("Sunday midnight") are plain naive comparisons everywhere
else in the code base.
"""

import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from app.core.config import settings


def _zone(tz_name: Optional[str] = None) -> ZoneInfo:
    return ZoneInfo(tz_name or settings.TIMEZONE)


def local_now(tz_name: Optional[str] = None) -> datetime.datetime:
    """Current naive wall-clock time in the competition zone."""
    return datetime.datetime.now(_zone(tz_name)).replace(tzinfo=None)


def to_local_naive(moment: datetime.datetime, tz_name: Optional[str] = None) -> datetime.datetime:
    """Convert *moment* to a naive competition-zone datetime.

    Naive inputs are assumed to already be local and are returned as is.
    """
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(_zone(tz_name)).replace(tzinfo=None)
