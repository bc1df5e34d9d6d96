"""Zero curve interpolation comparison.

Builds a zero-coupon curve from quoted (tenor, zero rate) anchors and
evaluates it with piecewise linear and natural cubic spline interpolation.

Key modules:
- conventions: Tenors, business calendars and day counts (QuantLib-backed)
- dates: Date coercion and the advance / year-fraction service
- interpolation: Linear and natural cubic spline interpolators
- curves: Anchor sets and zero curves
- analysis: Linear vs cubic comparison rows
- report: Console table rendering
"""

__version__ = "1.0.0"

from zerocurve.errors import InvalidQuery, MalformedCurveInput

__all__ = [
    "__version__",
    "InvalidQuery",
    "MalformedCurveInput",
    # Main modules are imported via subpackages
    "analysis",
    "conventions",
    "curves",
    "interpolation",
]
