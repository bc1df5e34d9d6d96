"""
Anchor points pinning a zero curve.

An anchor pairs a curve time (years from the evaluation date) with a
continuously compounded zero rate. Anchors built from market quotes also
remember the tenor and adjusted maturity date they came from.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Iterator, Optional, Sequence, Tuple, Union

import numpy as np

from zerocurve.conventions.tenor import Tenor
from zerocurve.dates import DateLike, DateService, to_date
from zerocurve.errors import MalformedCurveInput

logger = logging.getLogger(__name__)

AnchorQuote = Tuple[Union[str, Tenor], float]


@dataclass(frozen=True)
class AnchorPoint:
    """A (time, zero rate) pair on the curve."""

    time: float  # years from the evaluation date
    rate: float  # continuously compounded, decimal (0.035 for 3.5%)
    tenor: Optional[Tenor] = None
    maturity: Optional[date] = None


class AnchorSet:
    """Immutable, strictly time-ordered sequence of anchor points.

    Input order is kept as given: out-of-order or duplicate times are
    rejected rather than sorted.
    """

    def __init__(
        self,
        anchors: Iterable[AnchorPoint],
        evaluation_date: Optional[date] = None,
        date_service: Optional[DateService] = None,
    ):
        self._anchors = tuple(anchors)
        self.evaluation_date = evaluation_date
        # Calendar and day count the anchor times were measured with
        self.date_service = date_service

        if len(self._anchors) < 2:
            raise MalformedCurveInput(
                f"Need at least 2 anchors to build a curve, got {len(self._anchors)}"
            )

        for k, anchor in enumerate(self._anchors):
            if not math.isfinite(anchor.time):
                raise MalformedCurveInput(f"Anchor {k} has non-finite time: {anchor.time}")
            if not math.isfinite(anchor.rate):
                raise MalformedCurveInput(f"Anchor {k} has non-finite rate: {anchor.rate}")

        for prev, curr in zip(self._anchors, self._anchors[1:]):
            if curr.time <= prev.time:
                label = f" ({prev.tenor} -> {curr.tenor})" if curr.tenor is not None else ""
                raise MalformedCurveInput(
                    "Anchor times must be strictly increasing: "
                    f"{prev.time} followed by {curr.time}{label}"
                )

        self._times = np.array([a.time for a in self._anchors], dtype=float)
        self._rates = np.array([a.rate for a in self._anchors], dtype=float)
        self._times.setflags(write=False)
        self._rates.setflags(write=False)

    @classmethod
    def from_times(
        cls, times: Sequence[float], rates: Sequence[float]
    ) -> "AnchorSet":
        """Build a set straight from year fractions, without any calendar."""
        if len(times) != len(rates):
            raise MalformedCurveInput(
                f"Times and rates must have same length: {len(times)} != {len(rates)}"
            )
        return cls(AnchorPoint(float(t), float(r)) for t, r in zip(times, rates))

    @property
    def times(self) -> np.ndarray:
        return self._times

    @property
    def rates(self) -> np.ndarray:
        return self._rates

    def __len__(self) -> int:
        return len(self._anchors)

    def __iter__(self) -> Iterator[AnchorPoint]:
        return iter(self._anchors)

    def __getitem__(self, index: int) -> AnchorPoint:
        return self._anchors[index]

    def __repr__(self) -> str:
        pillars = ", ".join(
            f"{a.tenor or round(a.time, 6)}={a.rate:.4%}" for a in self._anchors
        )
        return f"AnchorSet({self.evaluation_date}, [{pillars}])"


def build_anchor_set(
    evaluation_date: DateLike,
    quotes: Sequence[AnchorQuote],
    date_service: Optional[DateService] = None,
) -> AnchorSet:
    """
    Build anchors from (tenor, zero rate) quotes.

    Each tenor is advanced from the evaluation date on the service calendar
    and the adjusted maturity is converted to a curve time with the service
    day count.

    Args:
        evaluation_date: Reference date every curve time is measured from
        quotes: Ordered (tenor, rate) pairs, e.g. [("6M", 0.03), ("1Y", 0.035)]
        date_service: Calendar/day-count service (TARGET, ACT/365F if None)

    Returns:
        AnchorSet for the evaluation date

    Raises:
        MalformedCurveInput: Fewer than 2 quotes, non-finite rates, or
            maturities that are not strictly increasing
        ValueError: Unparseable tenor
    """
    if date_service is None:
        date_service = DateService()
    eval_date = to_date(evaluation_date)

    anchors = []
    for tenor, rate in quotes:
        tenor = Tenor.parse(tenor)
        maturity, t = date_service.time_from(eval_date, tenor)
        anchors.append(AnchorPoint(time=t, rate=float(rate), tenor=tenor, maturity=maturity))

    anchor_set = AnchorSet(anchors, evaluation_date=eval_date, date_service=date_service)
    logger.info(
        "Built %d anchors from %s (%s .. %s years)",
        len(anchor_set), eval_date, anchor_set.times[0], anchor_set.times[-1],
    )
    return anchor_set
