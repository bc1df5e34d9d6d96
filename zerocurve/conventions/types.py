"""
Basic enums shared by the calendar and tenor helpers.
"""

from enum import Enum

import QuantLib as ql


class TimeUnit(Enum):
    """Tenor units."""

    DAYS = "D"
    WEEKS = "W"
    MONTHS = "M"
    YEARS = "Y"

    def to_ql(self) -> int:
        return _QL_TIME_UNITS[self]


class BusinessDayAdjustment(Enum):
    """Business day adjustment rules."""

    NO_ADJUSTMENT = "NO_ADJUSTMENT"
    FOLLOWING = "FOLLOWING"
    MODIFIED_FOLLOWING = "MODIFIED_FOLLOWING"
    PRECEDING = "PRECEDING"
    MODIFIED_PRECEDING = "MODIFIED_PRECEDING"

    def to_ql(self) -> int:
        return _QL_ADJUSTMENTS[self]


_QL_TIME_UNITS = {
    TimeUnit.DAYS: ql.Days,
    TimeUnit.WEEKS: ql.Weeks,
    TimeUnit.MONTHS: ql.Months,
    TimeUnit.YEARS: ql.Years,
}

_QL_ADJUSTMENTS = {
    BusinessDayAdjustment.NO_ADJUSTMENT: ql.Unadjusted,
    BusinessDayAdjustment.FOLLOWING: ql.Following,
    BusinessDayAdjustment.MODIFIED_FOLLOWING: ql.ModifiedFollowing,
    BusinessDayAdjustment.PRECEDING: ql.Preceding,
    BusinessDayAdjustment.MODIFIED_PRECEDING: ql.ModifiedPreceding,
}
