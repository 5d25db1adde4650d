import unittest
import math
import sys
import os

import numpy as np

sys.path.append(os.path.join(os.path.dirname(__file__), "../../"))
from customfloat.utils.combine import (
    CombineResult,
    InvalidArgument,
    checked_combine,
    combine,
)
from customfloat.utils.encoder import encode
from customfloat.utils.parsing import parse_double


class TestCombine(unittest.TestCase):
    """F(a, b) = 2ab / (a^2 + b^2)."""

    def test_both_zero_is_invalid(self):
        with self.assertRaises(InvalidArgument):
            combine(0, 0)
        with self.assertRaises(InvalidArgument):
            combine(-0.0, 0.0)
        with self.assertRaises(ValueError):
            combine(0.0, -0.0)

    def test_known_values(self):
        self.assertEqual(combine(1, 0), 0.0)
        self.assertEqual(combine(0, 5), 0.0)
        self.assertEqual(combine(1, 1), 1.0)
        self.assertEqual(combine(1, -1), -1.0)
        self.assertEqual(combine(3, 4), 24 / 25)
        self.assertEqual(combine(-2.5, -2.5), 1.0)

    def test_matches_direct_formula(self):
        rng = np.random.default_rng(7)
        for a, b in rng.uniform(-1e6, 1e6, size=(200, 2)):
            a, b = float(a), float(b)
            self.assertEqual(combine(a, b), (2 * a * b) / (a * a + b * b))

    def test_extreme_magnitudes(self):
        # The unscaled formula gives inf/inf and 0/0 here
        self.assertEqual(combine(1e200, 1e200), 1.0)
        self.assertEqual(combine(1e-200, 1e-200), 1.0)
        self.assertEqual(combine(5e-324, 5e-324), 1.0)
        self.assertAlmostEqual(combine(3e300, 4e300), 0.96)

    def test_subnormal_operands_match_direct_formula(self):
        # No scaling in this range, so subnormal operands keep all their bits
        for a, b in [(1.0, 5e-324), (-3.0, 1e-310), (0.5, 2.2e-308), (7e-310, 1.0)]:
            self.assertEqual(combine(a, b), (2 * a * b) / (a * a + b * b))
        self.assertEqual(combine(1.0, 5e-324), 1e-323)

    def test_bounded(self):
        for a, b in [(1, 2), (-7, 0.5), (1e-10, 1e10), (123.456, -654.321)]:
            self.assertLessEqual(abs(combine(a, b)), 1.0)

    def test_non_finite_operands(self):
        self.assertTrue(math.isnan(combine(float("inf"), 1.0)))
        self.assertTrue(math.isnan(combine(float("nan"), 1.0)))


class TestCheckedCombine(unittest.TestCase):
    """Result-returning variant."""

    def test_ok(self):
        result = checked_combine(3, 4)
        self.assertTrue(result.ok)
        self.assertEqual(result.value, 24 / 25)
        self.assertIsNone(result.error)

    def test_error(self):
        result = checked_combine(0, 0)
        self.assertFalse(result.ok)
        self.assertIsNone(result.value)
        self.assertIsInstance(result.error, InvalidArgument)
        self.assertIn("division by zero", str(result.error))

    def test_default_result(self):
        self.assertTrue(CombineResult(value=0.5).ok)


class TestTextRoundTrip(unittest.TestCase):
    """Re-encoding F(a, b) from its text gives the same encoding."""

    def test_repr_round_trip(self):
        pairs = [(1, 1), (3, 4), (1, 3), (2.5, -7.1), (1e-5, 3.0), (123.456, 0.001)]
        for a, b in pairs:
            value = combine(a, b)
            self.assertEqual(encode(parse_double(repr(value))), encode(value))

    def test_six_digit_text(self):
        # Values that are exact at six decimals survive fixed-point text too
        for a, b in [(1, 1), (3, 4), (1, 0)]:
            value = combine(a, b)
            self.assertEqual(encode(parse_double(f"{value:f}")), encode(value))


if __name__ == "__main__":
    unittest.main(verbosity=2)
