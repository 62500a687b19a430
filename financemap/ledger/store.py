"""Mini README: In-memory transaction ledger.

Structure:
    * Ledger - append-only store with inclusive date-range queries.

The ledger is created explicitly and handed to whichever interface needs it;
there is no module-level instance. Appending is the only mutation, entries
are never edited or removed, and everything is lost when the process exits.
A re-entrant lock serialises writers and readers so the HTTP interface can
share one ledger between worker threads.
"""

from __future__ import annotations

import threading
from datetime import date
from typing import Iterable, List, Optional

from ..errors import ValidationError
from ..logging_utils import get_logger
from .transaction import Transaction, TransactionType

LOGGER = get_logger(__name__)


class Ledger:
    """Hold every recorded transaction for the lifetime of the process."""

    def __init__(self, transactions: Optional[Iterable[Transaction]] = None) -> None:
        self._transactions: List[Transaction] = []
        self._lock = threading.RLock()
        if transactions:
            self.extend(transactions)
        LOGGER.debug("Ledger initialised with %s transactions", len(self._transactions))

    @classmethod
    def with_demo_data(cls) -> "Ledger":
        """Return a ledger populated with deterministic demo transactions."""

        return cls(
            [
                Transaction(date(2024, 3, 1), 2500.0, TransactionType.CREDIT, "Salary"),
                Transaction(date(2024, 3, 4), -85.4, TransactionType.DEBIT, "Groceries"),
                Transaction(date(2024, 3, 12), -1200.0, TransactionType.DEBIT, "Rent"),
                Transaction(date(2024, 3, 19), 150.0, TransactionType.CREDIT, "Freelance invoice"),
                Transaction(date(2024, 4, 1), 2500.0, TransactionType.CREDIT, "Salary"),
            ]
        )

    def __len__(self) -> int:
        with self._lock:
            return len(self._transactions)

    def append(self, transaction: Transaction) -> None:
        """Store ``transaction`` as-is; duplicates are allowed."""

        if not isinstance(transaction, Transaction):
            raise ValidationError(f"Only Transaction instances can be appended, got {type(transaction).__name__}")
        with self._lock:
            self._transactions.append(transaction)
        LOGGER.info(
            "Recorded %s of %.2f on %s",
            transaction.transaction_type.value,
            transaction.amount,
            transaction.occurred_on.isoformat(),
        )

    def add_transaction(
        self,
        occurred_on: object,
        amount: object,
        transaction_type: object,
        description: object = "",
    ) -> Transaction:
        """Validate raw field values, append the result and return it."""

        transaction = Transaction.create(occurred_on, amount, transaction_type, description)
        self.append(transaction)
        return transaction

    def extend(self, transactions: Iterable[Transaction]) -> List[Transaction]:
        """Append everything ``transactions`` yields, or nothing if any entry is invalid.

        Import sources are iterable, so ``ledger.extend(source)`` performs a
        bulk import.
        """

        batch = list(transactions)
        for transaction in batch:
            if not isinstance(transaction, Transaction):
                raise ValidationError(
                    f"Only Transaction instances can be appended, got {type(transaction).__name__}"
                )
        with self._lock:
            self._transactions.extend(batch)
        LOGGER.info("Bulk appended %s transactions", len(batch))
        return batch

    def query(self, start: Optional[date] = None, end: Optional[date] = None) -> List[Transaction]:
        """Return transactions dated within ``[start, end]`` in ascending date order.

        ``None`` leaves that side of the range open. Entries sharing a date
        keep their insertion order.
        """

        if start is not None and end is not None and start > end:
            raise ValidationError(f"Range start {start} is after range end {end}")
        with self._lock:
            matching = [
                transaction
                for transaction in self._transactions
                if (start is None or transaction.occurred_on >= start)
                and (end is None or transaction.occurred_on <= end)
            ]
        matching.sort(key=lambda transaction: transaction.occurred_on)
        LOGGER.debug("Query %s..%s matched %s transactions", start, end, len(matching))
        return matching

    def list_transactions(self) -> List[Transaction]:
        """Return every transaction ordered by date ascending."""

        return self.query()
