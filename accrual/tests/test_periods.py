from datetime import date

import pytest

from accrual.core.periods import (
    PERIOD_STRATEGIES,
    add_calendar_month,
    add_thirty_days,
    get_period_advance,
)
from accrual.errors import ConfigError


def test_calendar_month_keeps_day_of_month():
    assert add_calendar_month(date(2023, 1, 1)) == date(2023, 2, 1)
    assert add_calendar_month(date(2023, 12, 15)) == date(2024, 1, 15)


def test_calendar_month_clamps_to_month_end():
    assert add_calendar_month(date(2023, 1, 31)) == date(2023, 2, 28)
    assert add_calendar_month(date(2024, 1, 31)) == date(2024, 2, 29)
    assert add_calendar_month(date(2023, 3, 31)) == date(2023, 4, 30)


def test_thirty_days_is_fixed_length():
    assert add_thirty_days(date(2023, 1, 1)) == date(2023, 1, 31)
    assert add_thirty_days(date(2023, 2, 15)) == date(2023, 3, 17)


def test_lookup_by_name():
    assert get_period_advance("calendar-month") is add_calendar_month
    assert get_period_advance("fixed-30-day") is add_thirty_days
    assert set(PERIOD_STRATEGIES) == {"calendar-month", "fixed-30-day"}


def test_unknown_strategy_is_config_error():
    with pytest.raises(ConfigError, match="weekly"):
        get_period_advance("weekly")
