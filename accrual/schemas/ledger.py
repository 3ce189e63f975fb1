"""Data contracts for ledger input and accrual output."""

from __future__ import annotations

from datetime import date
from typing import Literal, Sequence

from pydantic import BaseModel, ConfigDict, Field

from accrual.errors import InvalidRowError

PeriodStrategyName = Literal["calendar-month", "fixed-30-day"]


class RawRow(BaseModel):
    """One data row as read from a tabular source, still as text."""

    model_config = ConfigDict(frozen=True)

    description: str = ""
    date_text: str
    amount_text: str
    row_number: int = Field(0, ge=0, description="Source line, 0 when unknown.")

    @classmethod
    def from_fields(cls, fields: Sequence[object], row_number: int = 0) -> "RawRow":
        """Bind the first three positional fields to description, date and amount."""
        if len(fields) < 3:
            raise InvalidRowError(
                row_number, "row", repr(list(fields)), f"expected 3 fields, got {len(fields)}"
            )
        description, date_text, amount_text = ("" if f is None else str(f) for f in fields[:3])
        return cls(
            description=description,
            date_text=date_text,
            amount_text=amount_text,
            row_number=row_number,
        )


class LedgerEntry(BaseModel):
    """A principal amount and the date compounding starts from."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    description: str = ""
    start_date: date
    principal: float


class AccrualPoint(BaseModel):
    """Balance at the end of one completed period."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    description: str
    period_end_date: str = Field(..., description="Period boundary as yyyy-MM-dd.")
    balance: float = Field(..., description="Balance rounded to 2 decimal places.")

