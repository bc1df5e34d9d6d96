"""
Exception types raised by curve construction and evaluation.
"""


class MalformedCurveInput(ValueError):
    """Raised when anchors cannot form a curve.

    Covers fewer than two anchors, times that are not strictly increasing,
    and non-finite times or rates.
    """

    pass


class InvalidQuery(ValueError):
    """Raised when a curve is asked for a rate at a non-finite time."""

    pass
