"""
Piecewise linear interpolation on zero rates.
"""
from .base import Interpolator


class LinearInterpolator(Interpolator):
    """Linear interpolation on zero rates.

    Outside the pillar range the slope of the nearest boundary segment is
    continued; rates are not clamped to the first or last pillar.
    """

    def _evaluate(self, i: int, t: float) -> float:
        t1, t2 = self.pillars[i], self.pillars[i + 1]
        r1, r2 = self.values[i], self.values[i + 1]

        weight = (t - t1) / (t2 - t1)
        return r1 + (r2 - r1) * weight
