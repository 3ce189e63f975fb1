"""Period-advance strategies used to step from one period boundary to the next."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Callable, Dict

from dateutil.relativedelta import relativedelta

from accrual.errors import ConfigError

PeriodAdvance = Callable[[date], date]

FIXED_PERIOD_DAYS = 30


def add_calendar_month(current: date) -> date:
    """Same day next month, clamped to the last day of shorter months."""
    return current + relativedelta(months=1)


def add_thirty_days(current: date) -> date:
    return current + timedelta(days=FIXED_PERIOD_DAYS)


PERIOD_STRATEGIES: Dict[str, PeriodAdvance] = {
    "calendar-month": add_calendar_month,
    "fixed-30-day": add_thirty_days,
}


def get_period_advance(name: str) -> PeriodAdvance:
    try:
        return PERIOD_STRATEGIES[name]
    except KeyError:
        known = ", ".join(sorted(PERIOD_STRATEGIES))
        raise ConfigError(f"unknown period strategy {name!r}; expected one of: {known}") from None
