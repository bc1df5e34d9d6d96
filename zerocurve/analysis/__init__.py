"""
Curve comparison analysis.
"""

from .compare import ComparisonRow, compare, compare_times

__all__ = [
    "ComparisonRow",
    "compare",
    "compare_times",
]
