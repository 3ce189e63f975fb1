"""Tabular readers and writers, selected by file extension."""

from accrual.formats.base import (
    OUTPUT_HEADER,
    TabularFormat,
    get_format,
    register_format,
    supported_extensions,
)
from accrual.formats import delimited, spreadsheet  # noqa: F401  (registers formats)

__all__ = [
    "OUTPUT_HEADER",
    "TabularFormat",
    "get_format",
    "register_format",
    "supported_extensions",
]
