"""Row parsing: raw text triples -> validated ledger entries.

Parsing is strict. The first malformed date or amount raises InvalidRowError
and the whole batch is abandoned; rows are never skipped.
"""

from __future__ import annotations

import logging
import math
from datetime import date, datetime
from typing import Iterable, List

from dateutil import parser as date_parser

from accrual.errors import InvalidRowError
from accrual.schemas.ledger import LedgerEntry, RawRow

logger = logging.getLogger(__name__)

# Data rows start on line 2; line 1 is the header the reader already dropped.
FIRST_DATA_ROW = 2

# Two fill-in dates that differ in year, month and day. A date that parses
# differently under each is missing one of them.
_FILL_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def parse_date(text: str) -> date:
    """Parse a calendar date without consulting the process locale.

    ISO-8601 is tried first; other forms (``03/15/2023``, ``15 Mar 2023``,
    ``2023-03-15 00:00:00``) fall back to dateutil with month-first ordering.
    Any time-of-day component is dropped. Text missing a year, month or day
    is rejected rather than filled in.

    Raises:
        ValueError: if the text is not a recognisable date.
    """
    cleaned = text.strip()
    if not cleaned:
        raise ValueError("empty date")
    try:
        return date.fromisoformat(cleaned)
    except ValueError:
        pass
    try:
        first, second = (
            date_parser.parse(cleaned, dayfirst=False, default=fill).date()
            for fill in _FILL_DEFAULTS
        )
    except (ValueError, OverflowError) as exc:
        raise ValueError(str(exc)) from exc
    if first != second:
        raise ValueError("incomplete date; year, month and day are required")
    return first


def parse_amount(text: str) -> float:
    """Parse a real number written with '.' as the decimal separator.

    Raises:
        ValueError: if the text is not a finite number.
    """
    cleaned = text.strip()
    if "_" in cleaned:
        raise ValueError("digit separators are not allowed")
    value = float(cleaned)
    if not math.isfinite(value):
        raise ValueError("amount must be finite")
    return value


def parse_row(raw: RawRow, row_number: int) -> LedgerEntry:
    row_number = raw.row_number or row_number
    try:
        start_date = parse_date(raw.date_text)
    except ValueError as exc:
        raise InvalidRowError(row_number, "date", raw.date_text, str(exc)) from exc

    try:
        principal = parse_amount(raw.amount_text)
    except ValueError as exc:
        raise InvalidRowError(row_number, "amount", raw.amount_text, str(exc)) from exc

    return LedgerEntry(description=raw.description, start_date=start_date, principal=principal)


def parse_rows(raw_rows: Iterable[RawRow]) -> List[LedgerEntry]:
    """Parse every row in order.

    Errors report the row number the reader recorded; rows without one are
    numbered by position, counting the header as row 1.

    Raises:
        InvalidRowError: on the first row with a bad date or amount.
    """
    entries = [
        parse_row(raw, row_number)
        for row_number, raw in enumerate(raw_rows, start=FIRST_DATA_ROW)
    ]
    logger.debug("parsed %d ledger entries", len(entries))
    return entries
