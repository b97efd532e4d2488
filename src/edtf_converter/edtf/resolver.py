"""Resolve a clean EDTF date into its ``[min, max]`` instant range.

The base instant is parsed from the clean ``YYYY[-MM[-DD]]`` string.  An
approximate value is widened by the configured variance in the unit of its
format (years, months or days).  The bounds are then snapped to the start
and end of that unit unconditionally, so a zero variance still yields a
whole year, month or day.  Instants are UTC with millisecond precision at
the upper bound (``23:59:59.999``).
"""

from __future__ import annotations

import calendar
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from dateutil.relativedelta import relativedelta

from ..utils.logging import get_logger
from .models import EdtfFormat

if TYPE_CHECKING:  # pragma: no cover
    from ..config.schema import ApproximateVariance

__all__ = ["parse_base", "shift", "start_of_unit", "end_of_unit", "resolve"]

logger = get_logger(__name__)

_EARLIEST = datetime(1, 1, 1, tzinfo=timezone.utc)
_LATEST = datetime(9999, 12, 31, 23, 59, 59, 999000, tzinfo=timezone.utc)


def parse_base(clean_segment: str, fmt: EdtfFormat) -> datetime:
    """Parse ``clean_segment`` under ``fmt`` into a UTC datetime.

    Missing month/day default to the first.  A day beyond the end of its
    month (``1930-02-31``) is clamped to the month's last day.
    """

    parts = [int(p) for p in clean_segment.split("-")]
    year = parts[0]
    month = parts[1] if fmt is not EdtfFormat.YEAR else 1
    day = parts[2] if fmt is EdtfFormat.YEAR_MONTH_DAY else 1
    last_day = calendar.monthrange(year, month)[1]
    if day > last_day:
        logger.debug("clamping day %02d to %02d for %s", day, last_day, clean_segment)
        day = last_day
    return datetime(year, month, day, tzinfo=timezone.utc)


def shift(instant: datetime, fmt: EdtfFormat, amount: int) -> datetime:
    """Move ``instant`` by ``amount`` units of ``fmt``, clamped to the calendar."""

    try:
        return instant + relativedelta(**{fmt.unit: amount})
    except (OverflowError, ValueError):
        return _EARLIEST if amount < 0 else _LATEST


def start_of_unit(instant: datetime, fmt: EdtfFormat) -> datetime:
    """Return the first instant of the year, month or day containing ``instant``."""

    instant = instant.replace(hour=0, minute=0, second=0, microsecond=0)
    if fmt is EdtfFormat.YEAR:
        return instant.replace(month=1, day=1)
    if fmt is EdtfFormat.YEAR_MONTH:
        return instant.replace(day=1)
    return instant


def end_of_unit(instant: datetime, fmt: EdtfFormat) -> datetime:
    """Return the last millisecond of the year, month or day containing ``instant``."""

    instant = instant.replace(hour=23, minute=59, second=59, microsecond=999000)
    if fmt is EdtfFormat.YEAR:
        return instant.replace(month=12, day=31)
    if fmt is EdtfFormat.YEAR_MONTH:
        return instant.replace(day=calendar.monthrange(instant.year, instant.month)[1])
    return instant


def resolve(
    clean_segment: str,
    fmt: EdtfFormat,
    is_approximate: bool,
    variance: "ApproximateVariance",
) -> tuple[datetime, datetime]:
    """Return the ``(min, max)`` instants ``clean_segment`` can denote."""

    base = parse_base(clean_segment, fmt)
    min_instant = max_instant = base
    if is_approximate:
        amount = getattr(variance, fmt.unit)
        min_instant = shift(base, fmt, -amount)
        max_instant = shift(base, fmt, amount)
    return start_of_unit(min_instant, fmt), end_of_unit(max_instant, fmt)
