"""
Base class for zero rate interpolation methods.
"""
import math
from abc import ABC, abstractmethod
from typing import List, Sequence

import numpy as np

from zerocurve.errors import InvalidQuery, MalformedCurveInput


class Interpolator(ABC):
    """Base class for curve interpolation methods.

    Subclasses evaluate one segment at a time; this class validates the
    anchors, rejects non-finite queries, returns stored values on exact node
    hits and locates the segment to use. Queries outside the pillar range
    use the first or last segment, so extrapolation continues the boundary
    segment unless a subclass overrides ``_extrapolate``.
    """

    def __init__(self, pillars: Sequence[float], values: Sequence[float]):
        """
        Initialize interpolator.

        Args:
            pillars: Time to maturity points (in years), strictly increasing
            values: Values to interpolate (zero rates)
        """
        if len(pillars) != len(values):
            raise MalformedCurveInput("Pillars and values must have same length")
        if len(pillars) < 2:
            raise MalformedCurveInput("Need at least 2 points for interpolation")

        self.pillars = np.array(pillars, dtype=float)
        self.values = np.array(values, dtype=float)

        if not np.all(np.isfinite(self.pillars)):
            raise MalformedCurveInput(f"Non-finite pillar times: {self.pillars.tolist()}")
        if not np.all(np.isfinite(self.values)):
            raise MalformedCurveInput(f"Non-finite values: {self.values.tolist()}")

        steps = np.diff(self.pillars)
        if np.any(steps <= 0):
            bad = int(np.argmax(steps <= 0))
            raise MalformedCurveInput(
                "Pillar times must be strictly increasing: "
                f"t[{bad}]={self.pillars[bad]} >= t[{bad + 1}]={self.pillars[bad + 1]}"
            )

        self.pillars.setflags(write=False)
        self.values.setflags(write=False)
        self._steps = steps

    @property
    def min_time(self) -> float:
        return float(self.pillars[0])

    @property
    def max_time(self) -> float:
        return float(self.pillars[-1])

    def interpolate(self, t: float) -> float:
        """Interpolate (or extrapolate) the value at time t."""
        t = self._check_query(t)

        # Exact node hit
        j = int(np.searchsorted(self.pillars, t))
        if j < len(self.pillars) and self.pillars[j] == t:
            return float(self.values[j])

        i = self._segment_index(t)
        if t < self.pillars[0] or t > self.pillars[-1]:
            return float(self._extrapolate(i, t))
        return float(self._evaluate(i, t))

    def interpolate_many(self, times: Sequence[float]) -> List[float]:
        """Interpolate values at multiple times."""
        return [self.interpolate(t) for t in times]

    def __call__(self, t: float) -> float:
        return self.interpolate(t)

    def __len__(self) -> int:
        return len(self.pillars)

    def _check_query(self, t: float) -> float:
        try:
            t = float(t)
        except (TypeError, ValueError) as exc:
            raise InvalidQuery(f"Query time is not a number: {t!r}") from exc
        if not math.isfinite(t):
            raise InvalidQuery(f"Query time must be finite: {t}")
        return t

    def _segment_index(self, t: float) -> int:
        """Index i of the segment [t_i, t_{i+1}] used for t, pinned to the boundary segments."""
        i = int(np.searchsorted(self.pillars, t, side='right')) - 1
        return min(max(i, 0), len(self.pillars) - 2)

    @abstractmethod
    def _evaluate(self, i: int, t: float) -> float:
        """Evaluate segment i at time t."""
        pass

    def _extrapolate(self, i: int, t: float) -> float:
        """Value outside the pillar range; continues the boundary segment."""
        return self._evaluate(i, t)
