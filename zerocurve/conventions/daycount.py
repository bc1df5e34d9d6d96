"""
QuantLib-backed day count conventions.

Curve times are year fractions from the evaluation date measured with one of
these conventions; ACT/365F is the default for zero curves.
"""

from datetime import date, datetime
from typing import Union

import QuantLib as ql


def _as_date(dt: Union[date, datetime]) -> date:
    """Convert datetime to date if needed."""
    return dt.date() if isinstance(dt, datetime) else dt


def _to_ql_date(dt: Union[date, datetime]) -> ql.Date:
    """Convert Python date/datetime to QuantLib Date."""
    py_date = _as_date(dt)
    return ql.Date(py_date.day, py_date.month, py_date.year)


class DayCountConvention:
    """Base class for QuantLib-backed day count conventions."""

    def __init__(self, name: str, ql_daycount: ql.DayCounter):
        self.name = name
        self._ql_daycount = ql_daycount

    def year_fraction(
        self, start: Union[date, datetime], end: Union[date, datetime]
    ) -> float:
        """Calculate year fraction between two dates using QuantLib."""
        return self._ql_daycount.yearFraction(_to_ql_date(start), _to_ql_date(end))

    def day_count(
        self, start: Union[date, datetime], end: Union[date, datetime]
    ) -> int:
        """Calculate number of days between two dates."""
        return self._ql_daycount.dayCount(_to_ql_date(start), _to_ql_date(end))

    def __str__(self) -> str:
        return self.name


class Actual365Fixed(DayCountConvention):
    """ACT/365F: actual days / 365, the zero curve time basis."""

    def __init__(self):
        super().__init__("ACT/365F", ql.Actual365Fixed())


class Actual360(DayCountConvention):
    """ACT/360: actual days / 360."""

    def __init__(self):
        super().__init__("ACT/360", ql.Actual360())


class ActualActualISDA(DayCountConvention):
    """ACT/ACT ISDA."""

    def __init__(self):
        super().__init__("ACT/ACT", ql.ActualActual(ql.ActualActual.ISDA))


class Thirty360US(DayCountConvention):
    """30/360 US (bond basis)."""

    def __init__(self):
        super().__init__("30/360", ql.Thirty360(ql.Thirty360.BondBasis))


# Pre-defined day count convention instances
ACT_365F = Actual365Fixed()
ACT_360 = Actual360()
ACT_ACT = ActualActualISDA()
THIRTY_360 = Thirty360US()

# Registry
DAY_COUNT_CONVENTIONS = {
    "ACT/365F": ACT_365F,
    "ACT/365": ACT_365F,
    "ACTUAL/365F": ACT_365F,
    "ACT/360": ACT_360,
    "ACTUAL/360": ACT_360,
    "ACT/ACT": ACT_ACT,
    "ACTUAL/ACTUAL": ACT_ACT,
    "ACT/ACT ISDA": ACT_ACT,
    "30/360": THIRTY_360,
    "30U/360": THIRTY_360,
}


def get_day_count_convention(name: str) -> DayCountConvention:
    """Get a day count convention by name."""
    name_upper = name.upper().strip()
    if name_upper not in DAY_COUNT_CONVENTIONS:
        raise ValueError(
            f"Unknown day count convention: {name}. "
            f"Available: {list(DAY_COUNT_CONVENTIONS.keys())}"
        )
    return DAY_COUNT_CONVENTIONS[name_upper]
