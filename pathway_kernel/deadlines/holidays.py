"""
Working-day calendar and calendar-month arithmetic.

A working day is Monday to Friday and not a listed bank holiday. Holidays
come from configuration so the calendar can be refreshed each year.
"""

import calendar
from datetime import date, timedelta
from functools import lru_cache
from typing import FrozenSet, Iterable, Optional

from pathway_kernel.models.config import KernelConfig

WEEKEND_DAYS = frozenset({5, 6})   # Saturday, Sunday


def add_months(start: date, months: int) -> date:
    """
    Add calendar months, clamping to the last day of a shorter target month.

    add_months(2025-01-31, 1) == 2025-02-28
    """
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(start.day, last_day))


class HolidayCalendar:
    """Business-day calendar backed by a fixed set of holiday dates."""

    def __init__(self, holidays: Optional[Iterable[date]] = None, division: str = "england-and-wales"):
        self.holidays: FrozenSet[date] = frozenset(holidays or ())
        self.division = division

    @classmethod
    def from_config(cls, config: KernelConfig) -> "HolidayCalendar":
        return cls(config.bank_holidays, division=config.holiday_division)

    def is_weekend(self, d: date) -> bool:
        return d.weekday() in WEEKEND_DAYS

    def is_holiday(self, d: date) -> bool:
        return d in self.holidays

    def is_business_day(self, d: date) -> bool:
        return not self.is_weekend(d) and not self.is_holiday(d)

    def add_working_days(self, start: date, days: int) -> date:
        """
        Walk forward one calendar day at a time, counting only working days.

        The start date itself is never counted, so adding 1 working day to a
        Thursday before a Good Friday and Easter Monday lands on the Tuesday.
        """
        if days < 0:
            raise ValueError("days must be non-negative")

        current = start
        remaining = days
        while remaining > 0:
            current += timedelta(days=1)
            if self.is_business_day(current):
                remaining -= 1
        return current

    def covers(self, d: date) -> bool:
        """Whether d falls within the years the holiday list covers."""
        if not self.holidays:
            return False
        return min(self.holidays).year <= d.year <= max(self.holidays).year


@lru_cache(maxsize=1)
def default_calendar() -> HolidayCalendar:
    """The bundled bank-holiday calendar, built once and shared."""
    return HolidayCalendar.from_config(KernelConfig())
