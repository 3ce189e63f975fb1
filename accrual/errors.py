"""Errors raised by the accrual pipeline."""

from __future__ import annotations


class AccrualError(Exception):
    """Base error for this package."""


class ConfigError(AccrualError):
    """Raised when the runtime configuration is missing or invalid."""


class UnsupportedFormatError(AccrualError):
    """Raised when no tabular format is registered for a file extension."""

    def __init__(self, path: str, supported: list[str]):
        self.path = path
        self.supported = supported
        super().__init__(
            f"unsupported file type for {path!r}; use one of: {', '.join(supported)}"
        )


class InvalidRowError(AccrualError):
    """Raised when a ledger row cannot be parsed into a LedgerEntry."""

    def __init__(self, row_number: int, field: str, value: str, reason: str):
        self.row_number = row_number
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"row {row_number}: invalid {field} {value!r}: {reason}")
