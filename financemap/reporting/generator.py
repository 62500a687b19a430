"""Mini README: Period report aggregation.

Structure:
    * Report - frozen summary of a resolved period.
    * summarise_amounts - credit, debit and net totals for a set of transactions.
    * ReportGenerator - resolves a period, queries the ledger, aggregates.

Amounts already carry their sign, so the net balance is a plain sum of the
credit and debit totals. Reports are data only; turning one into text is
the job of a renderer.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Dict, Iterable, Optional, Tuple, Union

from ..ledger import Ledger, Transaction
from ..logging_utils import get_logger
from .periods import Period, resolve_period

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Report:
    """Totals and transactions for one resolved period."""

    period: Period
    start: date
    end: date
    total_credits: float
    total_debits: float
    net_balance: float
    transactions: Tuple[Transaction, ...]
    count: int

    def as_dict(self) -> Dict[str, object]:
        """Export the report with serialisable values."""

        return {
            "period": self.period.value,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "total_credits": self.total_credits,
            "total_debits": self.total_debits,
            "net_balance": self.net_balance,
            "count": self.count,
            "transactions": [transaction.as_dict() for transaction in self.transactions],
        }


def summarise_amounts(transactions: Iterable[Transaction]) -> Tuple[float, float, float]:
    """Return ``(total_credits, total_debits, net_balance)``.

    Anything that is not strictly positive counts towards the debit total.
    """

    total_credits = 0.0
    total_debits = 0.0
    for transaction in transactions:
        if transaction.amount > 0:
            total_credits += transaction.amount
        else:
            total_debits += transaction.amount
    return total_credits, total_debits, total_credits + total_debits


class ReportGenerator:
    """Build reports over the current contents of a ledger."""

    def __init__(self, ledger: Ledger, *, today: Callable[[], date] = date.today) -> None:
        self._ledger = ledger
        self._today = today

    def generate(
        self,
        period: Union[str, Period],
        reference_date: Optional[date] = None,
    ) -> Report:
        """Report on the ``period`` containing ``reference_date`` (default: today)."""

        resolved = Period.from_name(period)
        reference = reference_date or self._today()
        date_range = resolve_period(resolved, reference)
        transactions = tuple(self._ledger.query(date_range.start, date_range.end))
        total_credits, total_debits, net_balance = summarise_amounts(transactions)
        LOGGER.info(
            "Generated %s report for %s..%s: %s transactions, net %.2f",
            resolved.value,
            date_range.start.isoformat(),
            date_range.end.isoformat(),
            len(transactions),
            net_balance,
        )
        return Report(
            period=resolved,
            start=date_range.start,
            end=date_range.end,
            total_credits=total_credits,
            total_debits=total_debits,
            net_balance=net_balance,
            transactions=transactions,
            count=len(transactions),
        )
