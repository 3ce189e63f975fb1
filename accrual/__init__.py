"""Retrospective compound-interest accrual for dated principal ledgers."""

__version__ = "0.1.0"
