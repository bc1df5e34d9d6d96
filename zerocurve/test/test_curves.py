import math
import unittest
from datetime import date

from zerocurve import market_data
from zerocurve.analysis import compare
from zerocurve.conventions import Tenor
from zerocurve.curves import (
    AnchorPoint,
    AnchorSet,
    CurveEvaluator,
    ZeroCurve,
    build_anchor_set,
)
from zerocurve.dates import DateService
from zerocurve.errors import InvalidQuery, MalformedCurveInput
from zerocurve.interpolation import CubicExtrapolation, InterpolationMode

EVAL_DATE = date(2025, 8, 24)

# ACT/365F day counts from 2025-08-24 to the TARGET-adjusted maturities
DAYS = {"3M": 92, "6M": 184, "1Y": 365, "2Y": 730, "5Y": 1828, "7Y": 2557,
        "10Y": 3652, "30Y": 10957, "40Y": 14610}


def _t(tenor):
    return DAYS[tenor] / 365.0


class TestAnchorSet(unittest.TestCase):
    def test_from_times(self):
        anchors = AnchorSet.from_times([1.0, 2.0], [0.03, 0.0375])
        self.assertEqual(len(anchors), 2)
        self.assertEqual(anchors[1], AnchorPoint(2.0, 0.0375))
        self.assertIsNone(anchors.evaluation_date)
        self.assertEqual(anchors.times.tolist(), [1.0, 2.0])

    def test_out_of_order_rejected(self):
        with self.assertRaises(MalformedCurveInput):
            AnchorSet.from_times([1.0, 0.5, 2.0], [0.03, 0.02, 0.04])

    def test_duplicate_rejected(self):
        with self.assertRaises(MalformedCurveInput):
            AnchorSet.from_times([1.0, 1.0], [0.03, 0.04])

    def test_too_few_rejected(self):
        with self.assertRaises(MalformedCurveInput):
            AnchorSet.from_times([1.0], [0.03])
        with self.assertRaises(MalformedCurveInput):
            AnchorSet([])

    def test_non_finite_rejected(self):
        with self.assertRaises(MalformedCurveInput):
            AnchorSet.from_times([1.0, 2.0], [0.03, float("nan")])
        with self.assertRaises(MalformedCurveInput):
            AnchorSet.from_times([1.0, float("inf")], [0.03, 0.04])

    def test_length_mismatch_rejected(self):
        with self.assertRaises(MalformedCurveInput):
            AnchorSet.from_times([1.0, 2.0, 3.0], [0.03, 0.04])

    def test_negative_rates_allowed(self):
        anchors = AnchorSet.from_times([1.0, 2.0], [-0.005, 0.001])
        self.assertEqual(anchors.rates.tolist(), [-0.005, 0.001])


class TestBuildAnchorSet(unittest.TestCase):
    def setUp(self):
        self.anchors = build_anchor_set(EVAL_DATE, market_data.ANCHOR_QUOTES)

    def test_times_follow_target_and_act_365f(self):
        for anchor, (tenor, rate) in zip(self.anchors, market_data.ANCHOR_QUOTES):
            self.assertEqual(anchor.tenor, Tenor.parse(tenor))
            self.assertAlmostEqual(anchor.time, _t(tenor), places=14)
            self.assertEqual(anchor.rate, rate)

    def test_maturities_are_business_days(self):
        self.assertEqual(self.anchors[3].maturity, date(2030, 8, 26))
        self.assertEqual(self.anchors.evaluation_date, EVAL_DATE)

    def test_duplicate_maturities_rejected(self):
        with self.assertRaises(MalformedCurveInput):
            build_anchor_set(EVAL_DATE, [("6M", 0.03), ("1Y", 0.035), ("12M", 0.036)])

    def test_non_monotonic_tenors_rejected(self):
        with self.assertRaises(MalformedCurveInput):
            build_anchor_set(EVAL_DATE, [("2Y", 0.03), ("1Y", 0.035)])

    def test_bad_tenor(self):
        with self.assertRaises(ValueError):
            build_anchor_set(EVAL_DATE, [("6Q", 0.03), ("1Y", 0.035)])

    def test_evaluation_date_is_per_anchor_set(self):
        later = build_anchor_set("2026-08-24", market_data.ANCHOR_QUOTES)
        self.assertEqual(later.evaluation_date, date(2026, 8, 24))
        self.assertNotEqual(later.times.tolist(), self.anchors.times.tolist())
        # Building a second set leaves the first untouched
        self.assertAlmostEqual(self.anchors[0].time, _t("6M"), places=14)

    def test_custom_date_service(self):
        anchors = build_anchor_set(
            EVAL_DATE, [("5Y", 0.04), ("10Y", 0.0425)], DateService(calendar="NULL")
        )
        self.assertEqual(anchors[0].maturity, date(2030, 8, 24))

    def test_anchor_set_records_date_service(self):
        service = DateService(calendar="NULL", day_count="ACT/360")
        anchors = build_anchor_set(EVAL_DATE, [("5Y", 0.04), ("10Y", 0.0425)], service)
        self.assertIs(anchors.date_service, service)
        self.assertIsNone(AnchorSet.from_times([1.0, 2.0], [0.03, 0.04]).date_service)

        curve = ZeroCurve(anchors)
        self.assertIs(curve.date_service, service)
        self.assertIs(CurveEvaluator(anchors).date_service, service)
        # Same calendar and day count as the anchors, so the 5Y date is a node
        self.assertEqual(curve.zero_rate_at(date(2030, 8, 24)), 0.04)

        override = DateService()
        self.assertIs(ZeroCurve(anchors, date_service=override).date_service, override)


class TestZeroCurve(unittest.TestCase):
    def setUp(self):
        self.anchors = build_anchor_set(EVAL_DATE, market_data.ANCHOR_QUOTES)
        self.evaluator = CurveEvaluator(self.anchors)

    def test_exact_at_anchors(self):
        for anchor in self.anchors:
            self.assertAlmostEqual(self.evaluator.zero_rate_linear(anchor.time), anchor.rate, delta=1e-12)
            self.assertAlmostEqual(self.evaluator.zero_rate_cubic(anchor.time), anchor.rate, delta=1e-12)

    def test_zero_rate_by_mode_name(self):
        t = _t("7Y")
        self.assertEqual(self.evaluator.zero_rate(t, "linear"), self.evaluator.zero_rate_linear(t))
        self.assertEqual(self.evaluator.zero_rate(t, "cubic"), self.evaluator.zero_rate_cubic(t))

    def test_curve_modes(self):
        self.assertIs(self.evaluator.curve("linear").mode, InterpolationMode.LINEAR)
        self.assertIs(
            self.evaluator.curve(InterpolationMode.NATURAL_CUBIC_SPLINE).mode,
            InterpolationMode.NATURAL_CUBIC_SPLINE,
        )

    def test_linear_extrapolation_past_30y(self):
        t10, t30, t40 = _t("10Y"), _t("30Y"), _t("40Y")
        expected = 0.0425 + (0.0450 - 0.0425) * (t40 - t10) / (t30 - t10)
        self.assertAlmostEqual(self.evaluator.zero_rate_linear(t40), expected, places=14)
        self.assertNotEqual(self.evaluator.zero_rate_linear(t40), 0.0450)

    def test_zero_rate_at_date(self):
        curve = self.evaluator.curve("linear")
        self.assertAlmostEqual(curve.zero_rate_at(date(2030, 8, 26)), 0.04, places=14)

    def test_zero_rate_at_needs_evaluation_date(self):
        curve = ZeroCurve(AnchorSet.from_times([1.0, 2.0], [0.03, 0.04]))
        with self.assertRaises(ValueError):
            curve.zero_rate_at(date(2026, 1, 1))

    def test_discount_factor(self):
        curve = self.evaluator.curve("cubic")
        t = _t("5Y")
        self.assertAlmostEqual(curve.discount_factor(t), math.exp(-0.04 * t), places=14)
        self.assertEqual(curve.discount_factor(0.0), math.exp(-0.0))

    def test_range_and_extrapolation_flag(self):
        curve = self.evaluator.curve("linear")
        self.assertAlmostEqual(curve.min_time, _t("6M"), places=14)
        self.assertAlmostEqual(curve.max_time, _t("30Y"), places=14)
        self.assertTrue(curve.allows_extrapolation)

    def test_invalid_query(self):
        with self.assertRaises(InvalidQuery):
            self.evaluator.zero_rate_cubic(float("nan"))
        with self.assertRaises(InvalidQuery):
            self.evaluator.zero_rate_linear(float("-inf"))

    def test_cubic_extrapolation_policy(self):
        linear_tail = CurveEvaluator(self.anchors, cubic_extrapolation=CubicExtrapolation.LINEAR)
        t = _t("7Y")
        self.assertAlmostEqual(linear_tail.zero_rate_cubic(t), self.evaluator.zero_rate_cubic(t), places=15)
        self.assertNotAlmostEqual(
            linear_tail.zero_rate_cubic(_t("40Y")), self.evaluator.zero_rate_cubic(_t("40Y")), places=8
        )

    def test_two_anchor_curves_agree(self):
        evaluator = CurveEvaluator(AnchorSet.from_times([0.5, 30.0], [0.03, 0.045]))
        for t in (0.1, 0.5, 7.0, 30.0, 40.0):
            self.assertAlmostEqual(evaluator.zero_rate_linear(t), evaluator.zero_rate_cubic(t), delta=1e-15)


class TestEndToEnd(unittest.TestCase):
    def test_demo_scenario(self):
        anchors = build_anchor_set(EVAL_DATE, market_data.ANCHOR_QUOTES)
        evaluator = CurveEvaluator(anchors)
        rows = compare(
            evaluator.curve("linear"),
            evaluator.curve("cubic"),
            market_data.QUERY_TENORS,
            EVAL_DATE,
        )

        self.assertEqual([str(row.tenor) for row in rows], ["3M", "7Y", "40Y"])
        for row in rows:
            self.assertTrue(row.ok)
            self.assertTrue(math.isfinite(row.linear_rate))
            self.assertTrue(math.isfinite(row.cubic_rate))

        three_m, seven_y, forty_y = rows
        self.assertEqual(seven_y.maturity, date(2032, 8, 24))
        self.assertAlmostEqual(seven_y.time, _t("7Y"), places=14)

        # 3M sits before the first anchor: first segment slope continued
        self.assertLess(three_m.time, anchors.times[0])
        self.assertAlmostEqual(three_m.linear_rate, 0.03 - 0.005 * 92 / 181, places=14)

        # 7Y lies strictly between the 5Y and 10Y anchors
        self.assertAlmostEqual(seven_y.linear_rate, 0.04 + 0.0025 * 729 / 1824, places=14)
        self.assertGreater(seven_y.cubic_rate, 0.0400)
        self.assertLess(seven_y.cubic_rate, 0.0425)

        # 40Y is beyond the 30Y anchor
        self.assertGreater(forty_y.time, anchors.times[-1])
        self.assertAlmostEqual(forty_y.linear_rate, 0.045 + 0.0025 * 3653 / 7305, places=14)

        # Cubic tail keeps evaluating the 10Y-30Y segment, measured from 10Y
        a, b, c, d = evaluator.curve("cubic").interpolator.coefficients[-1]
        dx = forty_y.time - anchors.times[-2]
        self.assertAlmostEqual(forty_y.cubic_rate, a + b * dx + c * dx**2 + d * dx**3, places=14)

        # Cubic head keeps evaluating the 6M-1Y segment
        a, b, c, d = evaluator.curve("cubic").interpolator.coefficients[0]
        dx = three_m.time - anchors.times[0]
        self.assertAlmostEqual(three_m.cubic_rate, a + b * dx + c * dx**2 + d * dx**3, places=14)


if __name__ == "__main__":
    unittest.main()
