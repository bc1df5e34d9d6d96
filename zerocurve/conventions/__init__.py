"""
Market conventions: tenors, business calendars and day counts.
"""

from .calendars import Calendar, get_calendar
from .daycount import DayCountConvention, get_day_count_convention
from .tenor import Tenor
from .types import BusinessDayAdjustment, TimeUnit

__all__ = [
    'BusinessDayAdjustment',
    'Calendar',
    'DayCountConvention',
    'Tenor',
    'TimeUnit',
    'get_calendar',
    'get_day_count_convention',
]
