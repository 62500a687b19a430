"""Mini README: Transaction storage for Financemap.

This package holds the transaction value object and the append-only
ledger that stores it. Interfaces build transactions with ``parse_entry``
(form text) or ``Transaction.create`` (loosely typed values) and record
them through a ``Ledger`` instance they were given.
"""

from .store import Ledger
from .transaction import NO_DESCRIPTION, Transaction, TransactionType, parse_entry

__all__ = ["Ledger", "NO_DESCRIPTION", "Transaction", "TransactionType", "parse_entry"]
