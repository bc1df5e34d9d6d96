"""
Date coercion and the calendar/day-count service used to turn tenors into
curve times.

The curve math never touches calendars directly; it only sees year
fractions produced by ``DateService``.
"""

import logging
from datetime import date, datetime
from typing import Tuple, Union

from pandas import Timestamp

from zerocurve.conventions.calendars import Calendar, get_calendar
from zerocurve.conventions.daycount import (
    DayCountConvention,
    get_day_count_convention,
)
from zerocurve.conventions.tenor import Tenor
from zerocurve.conventions.types import BusinessDayAdjustment

logger = logging.getLogger(__name__)

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

DateLike = Union[str, date, datetime, Timestamp]


def to_date(date_like: DateLike) -> date:
    """
    Convert a string, datetime or Timestamp to a date.
    Accepts 'YYYY-MM-DD' and 'YYYYMMDD' string formats.
    """
    if isinstance(date_like, Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(date_like.strip(), fmt).date()
            except ValueError:
                continue
        raise ValueError(f"Unsupported date string format: {date_like!r}")
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


class DateService:
    """Advances dates by tenors and measures year fractions between dates."""

    def __init__(
        self,
        calendar: Union[str, Calendar] = "TARGET",
        day_count: Union[str, DayCountConvention] = "ACT/365F",
        adjustment: BusinessDayAdjustment = BusinessDayAdjustment.FOLLOWING,
        end_of_month: bool = False,
    ):
        """
        Initialize the service.

        Args:
            calendar: Business calendar name or instance used by ``advance``
            day_count: Day count name or instance used by ``year_fraction``
            adjustment: Business day rule applied after advancing
            end_of_month: Keep month-end dates on month ends when advancing
        """
        self.calendar = calendar if isinstance(calendar, Calendar) else get_calendar(calendar)
        if isinstance(day_count, DayCountConvention):
            self.day_count = day_count
        else:
            self.day_count = get_day_count_convention(day_count)
        self.adjustment = adjustment
        self.end_of_month = end_of_month

    def advance(self, start: DateLike, tenor: Union[str, Tenor]) -> date:
        """Advance ``start`` by ``tenor`` on the service calendar."""
        return self.calendar.advance(
            to_date(start), tenor, self.adjustment, self.end_of_month
        )

    def year_fraction(self, start: DateLike, end: DateLike) -> float:
        """Year fraction from ``start`` to ``end`` under the service day count."""
        return self.day_count.year_fraction(to_date(start), to_date(end))

    def time_from(
        self, evaluation_date: DateLike, tenor: Union[str, Tenor]
    ) -> Tuple[date, float]:
        """Return the adjusted maturity of ``tenor`` and its curve time."""
        maturity = self.advance(evaluation_date, tenor)
        t = self.year_fraction(evaluation_date, maturity)
        logger.debug("Tenor %s from %s -> %s (t=%.6f)", tenor, evaluation_date, maturity, t)
        return maturity, t

    def __repr__(self) -> str:
        return (
            f"DateService(calendar={self.calendar.name}, day_count={self.day_count.name}, "
            f"adjustment={self.adjustment.value})"
        )
