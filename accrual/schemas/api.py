"""Request and response bodies for the HTTP API."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from accrual.schemas.ledger import AccrualPoint, PeriodStrategyName, RawRow


class PingResponse(BaseModel):
    message: str
    version: str


class LedgerRowPayload(BaseModel):
    """One ledger row as posted by a client, still as text."""

    model_config = ConfigDict(extra="forbid")

    description: Optional[str] = ""
    date: str
    amount: Union[str, float]

    def to_raw_row(self) -> RawRow:
        return RawRow(
            description=self.description or "",
            date_text=self.date,
            amount_text=str(self.amount),
        )


class AccrualRequest(BaseModel):
    """Inputs required to accrue interest over a ledger."""

    model_config = ConfigDict(extra="forbid")

    annual_rate_percent: float = Field(
        ..., description="Annual interest rate in percent (e.g. 5 for 5%)."
    )
    period_strategy: PeriodStrategyName = "calendar-month"
    as_of: Optional[datetime] = Field(
        None, description="Cutoff instant; defaults to the current time."
    )
    rows: List[LedgerRowPayload] = Field(default_factory=list)


class AccrualResponse(BaseModel):
    """Accrued balances, entry-major then chronological."""

    points: List[AccrualPoint]
    count: int = Field(..., ge=0)
