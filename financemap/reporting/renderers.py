"""Mini README: Report renderers.

Structure:
    * ReportRenderer - abstract interface for presenting a ``Report``.
    * TextSummaryRenderer - the plain-text summary shown by the interfaces.

The text layout is fixed: a title, the resolved period, the three totals and
one line per transaction. Graphical renderers can subclass ``ReportRenderer``
without the report generator knowing about them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from .generator import Report


class ReportRenderer(ABC):
    """Base interface for turning reports into a presentable form."""

    @abstractmethod
    def render(self, report: Report) -> str:
        """Return the rendered representation of ``report``."""


class TextSummaryRenderer(ReportRenderer):
    """Render the monospaced summary used by the console and HTTP views."""

    def render(self, report: Report) -> str:
        lines: List[str] = [
            "Financial Report",
            "============================",
            f"Period: {report.period.value} ({report.start.isoformat()} to {report.end.isoformat()})",
            "",
            f"Total Credits: ${report.total_credits:.2f}",
            f"Total Debits: ${report.total_debits:.2f}",
            f"Net Balance: ${report.net_balance:.2f}",
            "",
            f"--- All Transactions ({report.count}) ---",
        ]
        header = "\n".join(lines) + "\n"
        if not report.transactions:
            return header + "No transactions for this period."
        return header + "".join(f"{transaction}\n" for transaction in report.transactions)
