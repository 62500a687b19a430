"""Mini README: Period reporting for Financemap.

Groups period resolution, report aggregation and text rendering. Reports
are computed on demand from a ledger snapshot; nothing here keeps state
between calls.
"""

from .generator import Report, ReportGenerator, summarise_amounts
from .periods import DateRange, Period, resolve_period
from .renderers import ReportRenderer, TextSummaryRenderer

__all__ = [
    "DateRange",
    "Period",
    "Report",
    "ReportGenerator",
    "ReportRenderer",
    "TextSummaryRenderer",
    "resolve_period",
    "summarise_amounts",
]
