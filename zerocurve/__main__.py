"""
Build linear and natural cubic spline zero curves from the demo market data
and print their rates side by side.

Usage:
    python -m zerocurve [--evaluation-date 2025-08-24] [--tenors 3M,7Y,40Y]
"""

import argparse
import logging
import sys
from typing import List, Optional

from zerocurve import market_data
from zerocurve.analysis import compare
from zerocurve.config import Settings
from zerocurve.curves import CurveEvaluator, build_anchor_set
from zerocurve.interpolation import InterpolationMode
from zerocurve.report import render_comparison

logger = logging.getLogger("zerocurve")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zerocurve",
        description="Compare linear and natural cubic spline zero curve interpolation.",
    )
    parser.add_argument("--evaluation-date", help="Curve reference date (YYYY-MM-DD)")
    parser.add_argument("--calendar", help="Business calendar (TARGET, WEEKEND, NULL)")
    parser.add_argument("--day-count", help="Day count for curve times (e.g. ACT/365F)")
    parser.add_argument("--tenors", help="Comma separated query tenors (e.g. 3M,7Y,40Y)")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)")
    return parser


def run(settings: Settings) -> str:
    """Build both curves and return the rendered comparison table."""
    date_service = settings.date_service()
    anchors = build_anchor_set(
        settings.evaluation_date, market_data.ANCHOR_QUOTES, date_service
    )
    evaluator = CurveEvaluator(anchors, date_service)
    rows = compare(
        evaluator.curve(InterpolationMode.LINEAR),
        evaluator.curve(InterpolationMode.NATURAL_CUBIC_SPLINE),
        settings.query_tenors,
        settings.evaluation_date,
        date_service,
    )
    return render_comparison(rows, settings.evaluation_date)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = Settings.from_env().with_overrides(
            evaluation_date=args.evaluation_date,
            calendar=args.calendar,
            day_count=args.day_count,
            query_tenors=args.tenors,
            log_level=args.log_level,
        )
        logging.basicConfig(
            level=settings.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        print(run(settings))
    except Exception as exc:
        logger.debug("Comparison run failed", exc_info=True)
        print(f"An error occurred: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
