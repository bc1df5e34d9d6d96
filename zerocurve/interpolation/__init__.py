"""
Interpolation methods for zero curves.

Two schemes are provided for comparison: piecewise linear and natural cubic
spline, both on continuously compounded zero rates and both extrapolating
by continuing their boundary segment.
"""

# Base classes
from .base import Interpolator

# Cubic spline
from .cubic import (
    CubicExtrapolation,
    NaturalCubicSplineInterpolator,
    solve_tridiagonal,
)

# Factory and utilities
from .factory import (
    InterpolationMode,
    create_interpolator,
    zero_rate_to_discount_factor,
)

# Linear interpolation
from .linear import LinearInterpolator

__all__ = [
    # Base classes
    'Interpolator',

    # Interpolation methods
    'LinearInterpolator',
    'NaturalCubicSplineInterpolator',
    'CubicExtrapolation',
    'solve_tridiagonal',

    # Factory and utilities
    'InterpolationMode',
    'create_interpolator',
    'zero_rate_to_discount_factor',
]
