"""Accrual engine: compound a principal period by period up to "now"."""

from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import Iterable, List, Optional, Union

from accrual.core.periods import PeriodAdvance, add_calendar_month
from accrual.schemas.ledger import AccrualPoint, LedgerEntry

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365
DATE_FORMAT = "%Y-%m-%d"

Instant = Union[datetime, date]


def daily_rate(annual_rate: float) -> float:
    """Simple daily proration of a decimal annual rate (0.05 for 5%)."""
    return annual_rate / DAYS_PER_YEAR


def _as_datetime(value: Instant) -> datetime:
    if isinstance(value, datetime):
        # compare wall-clock to wall-clock; period boundaries are naive dates
        return value.replace(tzinfo=None)
    return datetime.combine(value, time.min)


def _next_boundary(advance: PeriodAdvance, current: date) -> Optional[date]:
    """Next period end, or None once it would fall past ``date.max``."""
    try:
        return advance(current)
    except (OverflowError, ValueError):
        # relativedelta raises ValueError for year 10000, timedelta OverflowError
        return None


def accrue_entry(
    entry: LedgerEntry,
    rate_per_day: float,
    now: Optional[Instant] = None,
    advance: PeriodAdvance = add_calendar_month,
) -> List[AccrualPoint]:
    """Emit one point per period whose end falls strictly before ``now``.

    Interest for a period is ``balance * rate_per_day * days_in_period``. The
    emitted balance is rounded to cents; the unrounded balance is what the
    next period compounds on. The trailing incomplete period is never emitted,
    nor is a period that would end past the last representable date.
    """
    cutoff = _as_datetime(now) if now is not None else datetime.now()

    balance = entry.principal
    current = entry.start_date
    points: List[AccrualPoint] = []

    next_date = _next_boundary(advance, current)
    while next_date is not None and _as_datetime(next_date) < cutoff:
        period_days = (next_date - current).days
        balance += balance * rate_per_day * period_days

        points.append(
            AccrualPoint(
                description=entry.description,
                period_end_date=next_date.strftime(DATE_FORMAT),
                balance=round(balance, 2),
            )
        )

        current = next_date
        next_date = _next_boundary(advance, current)

    logger.debug(
        "%r from %s: %d periods", entry.description, entry.start_date.isoformat(), len(points)
    )
    return points


def accrue(
    entries: Iterable[LedgerEntry],
    annual_rate: float,
    now: Optional[Instant] = None,
    advance: PeriodAdvance = add_calendar_month,
) -> List[AccrualPoint]:
    """Accrue every entry in input order.

    ``annual_rate`` is a decimal fraction. When ``now`` is None the clock is
    read once per entry.
    """
    rate_per_day = daily_rate(annual_rate)
    results: List[AccrualPoint] = []
    for entry in entries:
        results.extend(accrue_entry(entry, rate_per_day, now=now, advance=advance))
    return results
