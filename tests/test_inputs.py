"""Tests for input parsing and random demo inputs."""

import sys
import unittest
from pathlib import Path

import numpy as np
import pytest

# Add parent directory to path
sys.path.append(str(Path(__file__).resolve().parent.parent))

from matcalc import inputs


class TestParsing(unittest.TestCase):
    """Test coercion of user-entered values."""

    def test_parse_number(self):
        """Test numbers, blanks and garbage."""
        self.assertEqual(inputs.parse_number("2.5"), 2.5)
        self.assertEqual(inputs.parse_number(" -3 "), -3)
        self.assertEqual(inputs.parse_number("1e2"), 100)
        self.assertEqual(inputs.parse_number(7), 7.0)
        self.assertEqual(inputs.parse_number(""), 0)
        self.assertEqual(inputs.parse_number("abc"), 0)
        self.assertEqual(inputs.parse_number("nan"), 0)
        self.assertEqual(inputs.parse_number("inf"), 0)

    def test_parse_number_leading_prefix(self):
        """Test that a leading number is kept and trailing text ignored."""
        self.assertEqual(inputs.parse_number("3abc"), 3)
        self.assertEqual(inputs.parse_number("-1.5x"), -1.5)
        self.assertEqual(inputs.parse_number(".5"), 0.5)
        self.assertEqual(inputs.parse_number("2e"), 2)
        self.assertEqual(inputs.parse_number("1e3kg"), 1000)
        self.assertEqual(inputs.parse_number("x3"), 0)
        self.assertEqual(inputs.parse_number("-"), 0)

    def test_parse_row(self):
        """Test single-row parsing with padding and rejection of extra rows."""
        np.testing.assert_array_equal(inputs.parse_row("1 2", 3), [1, 2, 0])
        np.testing.assert_array_equal(inputs.parse_row("", 2), [0, 0])
        np.testing.assert_array_equal(inputs.parse_row(["4", "y"], 2), [4, 0])
        with pytest.raises(ValueError):
            inputs.parse_row("1 2; 3 4", 3)
        with pytest.raises(ValueError):
            inputs.parse_row("1 2 3", 2)

    def test_parse_vector(self):
        """Test text and sequence vectors, padding with zeros."""
        np.testing.assert_array_equal(inputs.parse_vector("1, 2, 3"), [1, 2, 3])
        np.testing.assert_array_equal(inputs.parse_vector("4 x"), [4, 0, 0])
        np.testing.assert_array_equal(inputs.parse_vector(""), [0, 0, 0])
        np.testing.assert_array_equal(inputs.parse_vector(["1", "", 5]), [1, 0, 5])
        with pytest.raises(ValueError):
            inputs.parse_vector("1 2 3 4")

    def test_parse_matrix(self):
        """Test row separators and zero padding."""
        np.testing.assert_array_equal(
            inputs.parse_matrix("1 2; 3 4", 2), [[1, 2], [3, 4]]
        )
        np.testing.assert_array_equal(
            inputs.parse_matrix("1,2,3\n4 5", 3), [[1, 2, 3], [4, 5, 0], [0, 0, 0]]
        )
        np.testing.assert_array_equal(
            inputs.parse_matrix([[1, "a"], [None, 4]], 2), [[1, 0], [0, 4]]
        )

    def test_parse_matrix_too_large(self):
        """Test that extra rows or columns raise ValueError."""
        with pytest.raises(ValueError):
            inputs.parse_matrix("1 2; 3 4; 5 6", 2)
        with pytest.raises(ValueError):
            inputs.parse_matrix("1 2 3; 4 5 6", 2)

    def test_sizes(self):
        """Test that only 2x2 through 5x5 are accepted."""
        for n in (2, 3, 4, 5):
            self.assertEqual(inputs.check_size(n), n)
            np.testing.assert_array_equal(inputs.zero_matrix(n), np.zeros((n, n)))
        for n in (0, 1, 6):
            with pytest.raises(ValueError):
                inputs.check_size(n)


class TestRandom(unittest.TestCase):
    """Test random matrix and vector generation."""

    def test_random_matrix(self):
        """Test range, integrality and the forced zero entry."""
        rng = np.random.default_rng(5)
        for n in (2, 3, 4, 5):
            for _ in range(10):
                M = inputs.random_matrix(n, rng=rng)
                self.assertEqual(M.shape, (n, n))
                self.assertTrue(np.all(M >= -10) and np.all(M <= 10))
                np.testing.assert_array_equal(M, np.round(M))
                self.assertIn(0, M)

    def test_random_matrix_seeded(self):
        """Test that a seed makes generation reproducible."""
        a = inputs.random_matrix(4, rng=np.random.default_rng(9))
        b = inputs.random_matrix(4, rng=np.random.default_rng(9))
        np.testing.assert_array_equal(a, b)

    def test_random_vectors(self):
        """Test vector shape and range."""
        v1, v2 = inputs.random_vectors(low=-2, high=2, rng=np.random.default_rng(1))
        for v in (v1, v2):
            self.assertEqual(v.shape, (3,))
            self.assertTrue(np.all(np.abs(v) <= 2))

    def test_invalid_range(self):
        """Test that low > high raises ValueError."""
        with pytest.raises(ValueError):
            inputs.random_matrix(3, low=5, high=1)
        with pytest.raises(ValueError):
            inputs.random_vectors(low=5, high=1)


if __name__ == "__main__":
    unittest.main()
