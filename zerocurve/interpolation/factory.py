"""
Factory functions and utilities for creating interpolators.
"""
import math
from enum import Enum
from typing import Sequence, Union

from .base import Interpolator
from .cubic import CubicExtrapolation, NaturalCubicSplineInterpolator
from .linear import LinearInterpolator


class InterpolationMode(Enum):
    """Interpolation policies available for zero curves."""

    LINEAR = "LINEAR"
    NATURAL_CUBIC_SPLINE = "NATURAL_CUBIC_SPLINE"

    @classmethod
    def parse(cls, mode: Union[str, "InterpolationMode"]) -> "InterpolationMode":
        """Parse a mode name ("linear", "cubic", "natural_cubic_spline")."""
        if isinstance(mode, InterpolationMode):
            return mode

        key = str(mode).upper().strip().replace("-", "_").replace(" ", "_")
        if key in _ALIASES:
            return _ALIASES[key]
        raise ValueError(
            f"Unknown interpolation method: {mode}. "
            f"Available: {sorted(_ALIASES.keys())}"
        )


_ALIASES = {
    "LINEAR": InterpolationMode.LINEAR,
    "CUBIC": InterpolationMode.NATURAL_CUBIC_SPLINE,
    "NATURAL_CUBIC": InterpolationMode.NATURAL_CUBIC_SPLINE,
    "NATURAL_CUBIC_SPLINE": InterpolationMode.NATURAL_CUBIC_SPLINE,
    "SPLINE": InterpolationMode.NATURAL_CUBIC_SPLINE,
}


def create_interpolator(
    method: Union[str, InterpolationMode],
    pillars: Sequence[float],
    values: Sequence[float],
    cubic_extrapolation: Union[str, CubicExtrapolation] = CubicExtrapolation.POLYNOMIAL,
) -> Interpolator:
    """
    Create an interpolator based on method name.

    Args:
        method: Interpolation mode or name
        pillars: Time points
        values: Values to interpolate
        cubic_extrapolation: Extrapolation rule for the cubic spline

    Returns:
        Configured interpolator
    """
    mode = InterpolationMode.parse(method)

    if mode is InterpolationMode.LINEAR:
        return LinearInterpolator(pillars, values)
    return NaturalCubicSplineInterpolator(pillars, values, cubic_extrapolation)


# Helper functions
def zero_rate_to_discount_factor(rate: float, time: float) -> float:
    """Convert continuously compounded zero rate to discount factor."""
    return math.exp(-rate * time)
