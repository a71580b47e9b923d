"""Resolve a timeframe token (1week, 1month, ..., all) to a concrete [start, end] range."""

from __future__ import annotations

import calendar
import logging
from datetime import datetime, timedelta, timezone

from app.core.enums import TimeFrame

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Months to step back per token; 1week is handled in days
_MONTHS_BACK: dict[TimeFrame, int] = {
    TimeFrame.ONE_MONTH: 1,
    TimeFrame.THREE_MONTHS: 3,
    TimeFrame.SIX_MONTHS: 6,
    TimeFrame.ONE_YEAR: 12,
}


def parse_timeframe(value: TimeFrame | str | None) -> TimeFrame:
    """Coerce a token to TimeFrame. Unknown or empty tokens fall back to 1month."""
    if isinstance(value, TimeFrame):
        return value
    try:
        return TimeFrame(value)
    except ValueError:
        logger.warning("Unknown timeframe %r, falling back to %s", value, TimeFrame.ONE_MONTH.value)
        return TimeFrame.ONE_MONTH


def _months_ago(dt: datetime, months: int) -> datetime:
    """Same wall-clock time `months` calendar months earlier; day clamped to month length."""
    total = dt.year * 12 + (dt.month - 1) - months
    year, month = divmod(total, 12)
    month += 1
    day = min(dt.day, calendar.monthrange(year, month)[1])
    return dt.replace(year=year, month=month, day=day)


def resolve_time_window(
    timeframe: TimeFrame | str,
    now: datetime | None = None,
) -> tuple[datetime, datetime]:
    """
    Return (start, end) for the timeframe relative to `now`.
    end is the last instant of now's day; start is the first instant of the
    start day (the epoch for `all`). Naive `now` is treated as UTC.
    """
    tf = parse_timeframe(timeframe)
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    end = now.replace(hour=23, minute=59, second=59, microsecond=999999)

    if tf == TimeFrame.ALL:
        return EPOCH, end
    if tf == TimeFrame.ONE_WEEK:
        start = now - timedelta(days=7)
    else:
        start = _months_ago(now, _MONTHS_BACK[tf])
    start = start.replace(hour=0, minute=0, second=0, microsecond=0)
    return start, end
