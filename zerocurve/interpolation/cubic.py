"""
Natural cubic spline interpolation on zero rates.
"""
import logging
from enum import Enum
from typing import Sequence, Union

import numpy as np

from .base import Interpolator

logger = logging.getLogger(__name__)


class CubicExtrapolation(Enum):
    """How the spline is continued outside the pillar range."""

    POLYNOMIAL = "POLYNOMIAL"  # keep evaluating the boundary segment's cubic
    LINEAR = "LINEAR"  # tangent line at the boundary pillar


def solve_tridiagonal(
    lower: np.ndarray, diag: np.ndarray, upper: np.ndarray, rhs: np.ndarray
) -> np.ndarray:
    """Solve a tridiagonal system with the Thomas algorithm.

    Args:
        lower: Sub-diagonal, length n - 1
        diag: Main diagonal, length n
        upper: Super-diagonal, length n - 1
        rhs: Right-hand side, length n

    Returns:
        Solution vector of length n
    """
    n = len(diag)
    c_prime = np.zeros(max(n - 1, 0))
    d_prime = np.zeros(n)

    d_prime[0] = rhs[0] / diag[0]
    if n > 1:
        c_prime[0] = upper[0] / diag[0]
    for k in range(1, n):
        denom = diag[k] - lower[k - 1] * c_prime[k - 1]
        if k < n - 1:
            c_prime[k] = upper[k] / denom
        d_prime[k] = (rhs[k] - lower[k - 1] * d_prime[k - 1]) / denom

    x = np.zeros(n)
    x[-1] = d_prime[-1]
    for k in range(n - 2, -1, -1):
        x[k] = d_prime[k] - c_prime[k] * x[k + 1]
    return x


class NaturalCubicSplineInterpolator(Interpolator):
    """Natural cubic spline on zero rates.

    The C2 piecewise cubic through every pillar with zero second derivative
    at both end pillars. Second derivatives are solved once at construction
    and each segment is stored as

        S_i(t) = a_i + b_i*dx + c_i*dx**2 + d_i*dx**3,   dx = t - t_i

    With two pillars no curvature can be determined and the spline is the
    straight line through both points.
    """

    def __init__(
        self,
        pillars: Sequence[float],
        values: Sequence[float],
        extrapolation: Union[str, CubicExtrapolation] = CubicExtrapolation.POLYNOMIAL,
    ):
        """
        Initialize spline.

        Args:
            pillars: Time to maturity points (in years), strictly increasing
            values: Zero rates at pillar points
            extrapolation: Continuation rule outside the pillar range
        """
        super().__init__(pillars, values)
        self.extrapolation = CubicExtrapolation(extrapolation)
        self.second_derivatives = self._solve_second_derivatives()

        h = self._steps
        m = self.second_derivatives
        y = self.values
        self._a = y[:-1].copy()
        self._b = (y[1:] - y[:-1]) / h - h * (2.0 * m[:-1] + m[1:]) / 6.0
        self._c = m[:-1] / 2.0
        self._d = (m[1:] - m[:-1]) / (6.0 * h)
        for arr in (self.second_derivatives, self._a, self._b, self._c, self._d):
            arr.setflags(write=False)

        logger.debug(
            "Natural cubic spline on %d pillars, second derivatives %s",
            len(self.pillars), m.tolist(),
        )

    def _solve_second_derivatives(self) -> np.ndarray:
        n = len(self.pillars)
        m = np.zeros(n)
        if n == 2:
            return m

        h = self._steps
        slopes = np.diff(self.values) / h

        # Rows for interior pillars 1..n-2; natural boundary fixes m[0] = m[-1] = 0
        diag = 2.0 * (h[:-1] + h[1:])
        lower = h[1:-1]
        upper = h[1:-1]
        rhs = 6.0 * (slopes[1:] - slopes[:-1])

        m[1:-1] = solve_tridiagonal(lower, diag, upper, rhs)
        return m

    @property
    def coefficients(self) -> np.ndarray:
        """Per-segment (a, b, c, d) coefficients, shape (n - 1, 4)."""
        return np.column_stack([self._a, self._b, self._c, self._d])

    def _evaluate(self, i: int, t: float) -> float:
        dx = t - self.pillars[i]
        return self._a[i] + dx * (self._b[i] + dx * (self._c[i] + dx * self._d[i]))

    def _segment_derivative(self, i: int, t: float) -> float:
        dx = t - self.pillars[i]
        return self._b[i] + dx * (2.0 * self._c[i] + 3.0 * self._d[i] * dx)

    def _extrapolate(self, i: int, t: float) -> float:
        if self.extrapolation is CubicExtrapolation.POLYNOMIAL:
            return self._evaluate(i, t)

        # Tangent line at the nearest boundary pillar
        edge = 0 if t < self.pillars[0] else len(self.pillars) - 1
        t_edge = self.pillars[edge]
        slope = self._segment_derivative(i, t_edge)
        return self.values[edge] + slope * (t - t_edge)

    def derivative(self, t: float) -> float:
        """First derivative of the spline at time t."""
        t = self._check_query(t)
        i = self._segment_index(t)
        if self.extrapolation is CubicExtrapolation.LINEAR and (
            t < self.pillars[0] or t > self.pillars[-1]
        ):
            edge = self.pillars[0] if t < self.pillars[0] else self.pillars[-1]
            return float(self._segment_derivative(i, edge))
        return float(self._segment_derivative(i, t))
