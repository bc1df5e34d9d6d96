"""
QuantLib-backed business calendars.

Anchor and query maturities are obtained by advancing the evaluation date by
a tenor on one of these calendars (TARGET by default).
"""

from datetime import date, datetime
from typing import Union

import QuantLib as ql

from zerocurve.conventions.tenor import Tenor
from zerocurve.conventions.types import BusinessDayAdjustment


def _to_ql_date(dt: Union[date, datetime]) -> ql.Date:
    """Convert Python date/datetime to QuantLib Date."""
    if isinstance(dt, datetime):
        dt = dt.date()
    return ql.Date(dt.day, dt.month, dt.year)


def _to_py_date(ql_date: ql.Date) -> date:
    """Convert QuantLib Date to Python date."""
    return date(ql_date.year(), ql_date.month(), ql_date.dayOfMonth())


class Calendar:
    """Base calendar class for QuantLib-backed business day calculations."""

    def __init__(self, name: str, ql_calendar: ql.Calendar):
        self.name = name
        self._ql_calendar = ql_calendar

    def is_business_day(self, dt: Union[date, datetime]) -> bool:
        """Check if date is a business day (not weekend or holiday)."""
        return self._ql_calendar.isBusinessDay(_to_ql_date(dt))

    def is_holiday(self, dt: Union[date, datetime]) -> bool:
        """Check if date is a holiday."""
        return self._ql_calendar.isHoliday(_to_ql_date(dt))

    def advance(
        self,
        start_date: Union[date, datetime],
        tenor: Union[str, Tenor],
        adjustment: BusinessDayAdjustment = BusinessDayAdjustment.FOLLOWING,
        end_of_month: bool = False,
    ) -> date:
        """Advance a date by a tenor and adjust the result to a business day.

        Follows QuantLib's ``Calendar.advance``: day tenors count business
        days, longer tenors use calendar arithmetic followed by the
        adjustment rule.
        """
        period = Tenor.parse(tenor).to_ql_period()
        ql_result = self._ql_calendar.advance(
            _to_ql_date(start_date), period, adjustment.to_ql(), end_of_month
        )
        return _to_py_date(ql_result)

    def __str__(self) -> str:
        return self.name


class TargetCalendar(Calendar):
    """TARGET (Trans-European Automated Real-time Gross settlement Express Transfer) calendar."""

    def __init__(self):
        super().__init__("TARGET", ql.TARGET())


class WeekendCalendar(Calendar):
    """Simple calendar that only considers weekends as non-business days."""

    def __init__(self):
        super().__init__("WEEKEND", ql.WeekendsOnly())


class NullCalendar(Calendar):
    """Calendar where every day is a business day."""

    def __init__(self):
        super().__init__("NULL", ql.NullCalendar())


# Pre-defined calendar instances
TARGET = TargetCalendar()
WEEKEND_ONLY = WeekendCalendar()
NULL_CALENDAR = NullCalendar()

# Calendar registry
CALENDARS = {
    "TARGET": TARGET,
    "EUR": TARGET,  # Alias
    "WEEKEND": WEEKEND_ONLY,
    "NULL": NULL_CALENDAR,
}


def get_calendar(name: str) -> Calendar:
    """Get a calendar by name ("TARGET", "EUR", "WEEKEND" or "NULL")."""
    key = name.upper().strip()
    if key not in CALENDARS:
        raise ValueError(
            f"Unknown calendar: {name}. Available: {list(CALENDARS.keys())}"
        )
    return CALENDARS[key]
