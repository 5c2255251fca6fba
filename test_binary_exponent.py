#!/usr/bin/env python3
"""
Test suite for binary exponentiation.

Checks the recursive and iterative versions against the known results and
against each other, including values that overflow 64 bits.
"""

import unittest
import sys
import os

# Add the project root to the path so we can import binary_exponent
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from binary_exponent import binary_exponent_iterative, binary_exponent_recursive
from int64 import INT64_MAX, INT64_MIN, to_int64

IMPLEMENTATIONS = (binary_exponent_recursive, binary_exponent_iterative)

# (base, exponent, expected)
KNOWN_RESULTS = [
    (2, 10, 1024),
    (3, 7, 2187),
    (4, 12, 16777216),
    (5, 15, 30517578125),
    (6, 20, 3656158440062976),
]


class TestBinaryExponent(unittest.TestCase):
    """Test cases for both exponentiation variants."""

    def test_known_results(self):
        """Test the reference inputs."""
        for power in IMPLEMENTATIONS:
            for base, exponent, expected in KNOWN_RESULTS:
                with self.subTest(power=power.__name__, base=base, exponent=exponent):
                    self.assertEqual(power(base, exponent), expected)

    def test_zero_exponent(self):
        for power in IMPLEMENTATIONS:
            for base in (0, 1, -1, 7, INT64_MAX, INT64_MIN):
                self.assertEqual(power(base, 0), 1)

    def test_negative_base(self):
        for power in IMPLEMENTATIONS:
            self.assertEqual(power(-2, 3), -8)
            self.assertEqual(power(-2, 4), 16)
            self.assertEqual(power(-1, 1001), -1)

    def test_matches_builtin_pow_in_range(self):
        for power in IMPLEMENTATIONS:
            for base in range(-9, 10):
                for exponent in range(0, 19):
                    self.assertEqual(power(base, exponent), base ** exponent)

    def test_overflow_wraps(self):
        """Results wrap like a native signed 64-bit integer."""
        for power in IMPLEMENTATIONS:
            self.assertEqual(power(2, 62), 1 << 62)
            self.assertEqual(power(2, 63), INT64_MIN)
            self.assertEqual(power(2, 64), 0)
            self.assertEqual(power(3, 40), to_int64(3 ** 40))
            self.assertEqual(power(3, 40), -6289078614652622815)

    def test_recursive_and_iterative_agree(self):
        bases = [-10, -3, -2, 0, 1, 2, 3, 7, 10, 12345, INT64_MAX, INT64_MIN]
        exponents = [0, 1, 2, 3, 5, 8, 13, 31, 32, 63, 64, 100, 1000, INT64_MAX]
        for base in bases:
            for exponent in exponents:
                with self.subTest(base=base, exponent=exponent):
                    self.assertEqual(
                        binary_exponent_recursive(base, exponent),
                        binary_exponent_iterative(base, exponent),
                    )

    def test_negative_exponent_rejected(self):
        for power in IMPLEMENTATIONS:
            with self.assertRaises(ValueError):
                power(2, -1)
            with self.assertRaises(ValueError):
                power(0, INT64_MIN)


def run_tests():
    """Run all tests and display results."""
    print("Running Binary Exponent Test Suite")
    print("=" * 50)

    loader = unittest.TestLoader()
    suite = loader.loadTestsFromTestCase(TestBinaryExponent)

    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(suite)

    print("\n" + "=" * 50)
    if result.wasSuccessful():
        print("✓ All tests passed!")
    else:
        print(f"✗ {len(result.failures)} test(s) failed")
        print(f"✗ {len(result.errors)} error(s) occurred")

    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_tests()
    sys.exit(0 if success else 1)
