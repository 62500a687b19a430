"""Mini README: Core package initializer for Financemap.

Financemap is a personal finance tracker: an in-memory transaction ledger,
named reporting periods and text summaries, reachable from a console menu or
a small HTTP interface. Convenience imports expose the pieces most callers
need without importing the interface layer.
"""

from .errors import FinancemapError, InvalidPeriod, ParseError, ValidationError
from .ledger import Ledger, Transaction, TransactionType
from .logging_utils import get_logger
from .reporting import Period, Report, ReportGenerator, resolve_period

__all__ = [
    "FinancemapError",
    "InvalidPeriod",
    "Ledger",
    "ParseError",
    "Period",
    "Report",
    "ReportGenerator",
    "Transaction",
    "TransactionType",
    "ValidationError",
    "get_logger",
    "resolve_period",
]
