"""
Side-by-side evaluation of a linear and a cubic spline curve.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Sequence, Union

from zerocurve.conventions.tenor import Tenor
from zerocurve.curves.zero_curve import ZeroCurve
from zerocurve.dates import DateLike, DateService, to_date
from zerocurve.errors import InvalidQuery

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComparisonRow:
    """One query of the comparison report.

    Rates are None and ``error`` holds the message when the query failed.
    """

    tenor: Optional[Tenor]
    maturity: Optional[date]
    time: float
    linear_rate: Optional[float]
    cubic_rate: Optional[float]
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def label(self) -> str:
        return str(self.tenor) if self.tenor is not None else f"{self.time:g}Y"


def _evaluate_row(
    curve_linear: ZeroCurve,
    curve_cubic: ZeroCurve,
    t: float,
    tenor: Optional[Tenor] = None,
    maturity: Optional[date] = None,
) -> ComparisonRow:
    try:
        linear_rate = curve_linear.zero_rate(t)
        cubic_rate = curve_cubic.zero_rate(t)
    except InvalidQuery as exc:
        logger.warning("Query %s failed: %s", tenor if tenor is not None else t, exc)
        return ComparisonRow(tenor, maturity, t, None, None, str(exc))
    return ComparisonRow(tenor, maturity, t, linear_rate, cubic_rate)


def compare(
    curve_linear: ZeroCurve,
    curve_cubic: ZeroCurve,
    query_tenors: Sequence[Union[str, Tenor]],
    evaluation_date: Optional[DateLike] = None,
    date_service: Optional[DateService] = None,
) -> List[ComparisonRow]:
    """
    Evaluate both curves at each query tenor.

    Tenors are turned into curve times with the same calendar and day count
    used to build the anchors. Rows follow the input order; a query that
    fails with ``InvalidQuery`` yields a row carrying the error and does not
    stop the others.

    Args:
        curve_linear: Linearly interpolated curve
        curve_cubic: Cubic spline curve over the same anchor set
        query_tenors: Offsets from the evaluation date, e.g. ["3M", "7Y", "40Y"]
        evaluation_date: Date the offsets are measured from; defaults to the
            curves' evaluation date and must match it when both are known
        date_service: Calendar/day-count service; defaults to the curves' own

    Returns:
        One ComparisonRow per query tenor

    Raises:
        ValueError: The curves sit on different anchor sets, the evaluation
            date disagrees with theirs, or no evaluation date is known
    """
    if curve_linear.anchors is not curve_cubic.anchors:
        raise ValueError("Curves to compare must be built on the same anchor set")

    curve_date = curve_linear.evaluation_date
    if evaluation_date is None:
        if curve_date is None:
            raise ValueError(
                "Curves were built from raw times; pass the evaluation date explicitly"
            )
        eval_date = curve_date
    else:
        eval_date = to_date(evaluation_date)
        if curve_date is not None and eval_date != curve_date:
            raise ValueError(
                f"Evaluation date {eval_date} does not match the curves' "
                f"evaluation date {curve_date}"
            )

    if date_service is None:
        date_service = curve_linear.date_service

    rows = []
    for tenor in query_tenors:
        tenor = Tenor.parse(tenor)
        maturity, t = date_service.time_from(eval_date, tenor)
        rows.append(_evaluate_row(curve_linear, curve_cubic, t, tenor, maturity))
    return rows


def compare_times(
    curve_linear: ZeroCurve,
    curve_cubic: ZeroCurve,
    times: Sequence[float],
) -> List[ComparisonRow]:
    """Evaluate both curves at raw curve times, isolating failed queries."""
    return [_evaluate_row(curve_linear, curve_cubic, t) for t in times]
