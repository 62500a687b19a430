"""Mini README: Exception types shared across Financemap.

Structure:
    * FinancemapError - common base so interfaces can catch one type.
    * ParseError - malformed text typed into an entry form.
    * ValidationError - values rejected at the ledger boundary.
    * InvalidPeriod - unrecognised reporting period name.
    * ImportNotSupported - an import source without an implementation.

Every error also derives from ``ValueError`` so existing ``except
ValueError`` handlers keep catching them.
"""

from __future__ import annotations


class FinancemapError(Exception):
    """Base class for recoverable Financemap errors."""


class ParseError(FinancemapError, ValueError):
    """Raised when a form field cannot be parsed."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class ValidationError(FinancemapError, ValueError):
    """Raised when a transaction or range violates the ledger rules."""


class InvalidPeriod(FinancemapError, ValueError):
    """Raised when a report is requested for an unknown period name."""

    def __init__(self, name: object) -> None:
        super().__init__(f"Unsupported reporting period: {name!r}")
        self.name = name


class ImportNotSupported(FinancemapError, ValueError):
    """Raised by import sources whose parsing is not implemented."""
