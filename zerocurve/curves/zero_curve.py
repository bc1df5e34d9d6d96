"""
Zero curves over an anchor set.

``ZeroCurve`` is one interpolation policy applied to an anchor set;
``CurveEvaluator`` holds both policies over the same anchors so they can be
compared query by query.
"""

import logging
from typing import Dict, Optional, Union

from zerocurve.curves.anchors import AnchorSet
from zerocurve.dates import DateLike, DateService, to_date
from zerocurve.interpolation import (
    CubicExtrapolation,
    InterpolationMode,
    Interpolator,
    create_interpolator,
    zero_rate_to_discount_factor,
)

logger = logging.getLogger(__name__)


class ZeroCurve:
    """Continuously compounded zero rate as a function of time.

    Built once over an anchor set; the interpolator is read-only afterwards,
    so a curve may be queried from several threads. Extrapolation is always
    enabled.
    """

    allows_extrapolation = True

    def __init__(
        self,
        anchors: AnchorSet,
        mode: Union[str, InterpolationMode] = InterpolationMode.LINEAR,
        date_service: Optional[DateService] = None,
        cubic_extrapolation: Union[str, CubicExtrapolation] = CubicExtrapolation.POLYNOMIAL,
        name: str = "",
    ):
        """
        Initialize zero curve.

        Args:
            anchors: Anchor set the curve passes through
            mode: Interpolation policy
            date_service: Used by ``zero_rate_at`` to turn dates into times
                (defaults to the service that built the anchors)
            cubic_extrapolation: Extrapolation rule when mode is the cubic spline
            name: Optional curve name for identification
        """
        self.anchors = anchors
        self.mode = InterpolationMode.parse(mode)
        self.date_service = date_service or anchors.date_service or DateService()
        self.name = name
        self._interpolator: Interpolator = create_interpolator(
            self.mode, anchors.times, anchors.rates, cubic_extrapolation
        )
        logger.info("Built %s zero curve on %d anchors", self.mode.value, len(anchors))

    @property
    def interpolator(self) -> Interpolator:
        return self._interpolator

    @property
    def min_time(self) -> float:
        return self._interpolator.min_time

    @property
    def max_time(self) -> float:
        return self._interpolator.max_time

    @property
    def evaluation_date(self):
        return self.anchors.evaluation_date

    def zero_rate(self, t: float) -> float:
        """Zero rate at time t (years from the evaluation date)."""
        rate = self._interpolator.interpolate(t)
        if t < self.min_time or t > self.max_time:
            logger.debug(
                "%s curve extrapolating at t=%s outside [%s, %s]: %s",
                self.mode.value, t, self.min_time, self.max_time, rate,
            )
        return rate

    def zero_rate_at(self, dt: DateLike) -> float:
        """Zero rate at a calendar date."""
        if self.evaluation_date is None:
            raise ValueError("Curve was built from raw times and has no evaluation date")
        t = self.date_service.year_fraction(self.evaluation_date, to_date(dt))
        return self.zero_rate(t)

    def discount_factor(self, t: float) -> float:
        """Discount factor exp(-r(t) * t)."""
        return zero_rate_to_discount_factor(self.zero_rate(t), t)

    def __call__(self, t: float) -> float:
        return self.zero_rate(t)

    def __str__(self) -> str:
        label = self.name or self.mode.value
        return f"{self.__class__.__name__}({label})"


class CurveEvaluator:
    """Both interpolation policies over one anchor set."""

    def __init__(
        self,
        anchors: AnchorSet,
        date_service: Optional[DateService] = None,
        cubic_extrapolation: Union[str, CubicExtrapolation] = CubicExtrapolation.POLYNOMIAL,
    ):
        self.anchors = anchors
        self.date_service = date_service or anchors.date_service or DateService()
        self._curves: Dict[InterpolationMode, ZeroCurve] = {
            mode: ZeroCurve(anchors, mode, self.date_service, cubic_extrapolation)
            for mode in InterpolationMode
        }

    def curve(self, mode: Union[str, InterpolationMode]) -> ZeroCurve:
        return self._curves[InterpolationMode.parse(mode)]

    def zero_rate(self, t: float, mode: Union[str, InterpolationMode]) -> float:
        """Zero rate at time t under the requested interpolation mode."""
        return self.curve(mode).zero_rate(t)

    def zero_rate_linear(self, t: float) -> float:
        return self.zero_rate(t, InterpolationMode.LINEAR)

    def zero_rate_cubic(self, t: float) -> float:
        return self.zero_rate(t, InterpolationMode.NATURAL_CUBIC_SPLINE)
