"""
Hard-coded market data for the interpolation comparison.

Zero rates are continuously compounded, in decimal.
"""

from datetime import date

EVALUATION_DATE = date(2025, 8, 24)

ANCHOR_QUOTES = [
    ("6M", 0.0300),
    ("1Y", 0.0350),
    ("2Y", 0.0375),
    ("5Y", 0.0400),
    ("10Y", 0.0425),
    ("30Y", 0.0450),
]

# 3M sits before the first anchor and 40Y beyond the last one
QUERY_TENORS = ["3M", "7Y", "40Y"]

CALENDAR = "TARGET"
DAY_COUNT = "ACT/365F"
