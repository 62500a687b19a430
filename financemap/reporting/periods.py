"""Mini README: Named reporting periods and their date ranges.

Structure:
    * Period - the recognised period names (case-sensitive).
    * DateRange - inclusive ``(start, end)`` pair.
    * resolve_period - maps a period and reference date to a ``DateRange``.

Weeks run Monday to Sunday. Month ends come from ``calendar.monthrange`` so
February in leap years resolves to the 29th.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import List, Union

from ..errors import InvalidPeriod, ValidationError


class Period(str, Enum):
    """Reporting periods offered to users."""

    DAILY = "Daily"
    WEEKLY = "Weekly"
    MONTHLY = "Monthly"
    YEARLY = "Yearly"

    @classmethod
    def from_name(cls, name: Union[str, "Period"]) -> "Period":
        """Look up a period by its exact name."""

        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError as error:
            raise InvalidPeriod(name) from error

    @classmethod
    def names(cls) -> List[str]:
        return [period.value for period in cls]


@dataclass(frozen=True, slots=True)
class DateRange:
    """Inclusive calendar range."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValidationError(f"Range start {self.start} is after range end {self.end}")

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


def resolve_period(period: Union[str, Period], reference_date: date) -> DateRange:
    """Return the range of ``period`` that contains ``reference_date``."""

    resolved = Period.from_name(period)
    if resolved is Period.DAILY:
        return DateRange(reference_date, reference_date)
    if resolved is Period.WEEKLY:
        monday = reference_date - timedelta(days=reference_date.weekday())
        return DateRange(monday, monday + timedelta(days=6))
    if resolved is Period.MONTHLY:
        last_day = calendar.monthrange(reference_date.year, reference_date.month)[1]
        return DateRange(reference_date.replace(day=1), reference_date.replace(day=last_day))
    return DateRange(
        reference_date.replace(month=1, day=1),
        reference_date.replace(month=12, day=31),
    )
