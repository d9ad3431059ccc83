"""Tests for operation dispatch and result formatting."""

import sys
import unittest
from pathlib import Path

import numpy as np
import pytest

# Add parent directory to path
sys.path.append(str(Path(__file__).resolve().parent.parent))

from matcalc import formatting, matrix, operations


class TestOperations(unittest.TestCase):
    """Test named operation dispatch."""

    def test_registries(self):
        """Test the offered operation names."""
        self.assertEqual(
            list(operations.MATRIX_OPERATIONS),
            ["determinant", "transpose", "adjoint", "inverse"],
        )
        self.assertEqual(list(operations.VECTOR_OPERATIONS), ["dot", "cross", "cos", "sin"])

    def test_run_matrix_operation(self):
        """Test dispatching matrix operations."""
        M = [[1, 2], [3, 4]]
        self.assertEqual(operations.run_matrix_operation("determinant", M), -2)
        np.testing.assert_allclose(
            operations.run_matrix_operation("inverse", M), [[-2, 1], [1.5, -0.5]]
        )
        result = operations.run_matrix_operation("inverse", [[1, 2], [2, 4]], eps=1e-10)
        self.assertTrue(matrix.is_singular(result))

    def test_run_vector_operation(self):
        """Test dispatching vector operations."""
        self.assertEqual(operations.run_vector_operation("dot", [1, 2, 3], [4, 5, 6]), 32)
        self.assertEqual(operations.run_vector_operation("sin", [1, 0, 0], [0, 1, 0]), 1)

    def test_unknown_operation(self):
        """Test that unknown names raise ValueError."""
        with pytest.raises(ValueError):
            operations.run_matrix_operation("dot", np.eye(2))
        with pytest.raises(ValueError):
            operations.run_vector_operation("inverse", [1, 0, 0], [0, 1, 0])
        with pytest.raises(ValueError):
            operations.get_operation("trace")


class TestFormatting(unittest.TestCase):
    """Test text and JSON rendering of results."""

    def test_format_scalar(self):
        """Test fixed decimals and negative zero."""
        self.assertEqual(formatting.format_scalar(-2), "-2.0000")
        self.assertEqual(formatting.format_scalar(1 / 3, 3), "0.333")
        self.assertEqual(formatting.format_scalar(-0.00001), "0.0000")

    def test_format_matrix(self):
        """Test right-aligned grid rows."""
        text = formatting.format_matrix([[-2, 1], [1.5, -0.5]])
        self.assertEqual(text, "[ -2.000   1.000 ]\n[  1.500  -0.500 ]")

    def test_format_vector(self):
        """Test a single bracketed row."""
        self.assertEqual(formatting.format_vector([-3, 6, -3]), "[ -3.000  6.000  -3.000 ]")

    def test_format_result(self):
        """Test headers and bodies for each kind of result."""
        self.assertEqual(
            formatting.format_result("determinant", -2.0),
            "Result: Determinant\ndet(A) = -2.0000",
        )
        self.assertEqual(
            formatting.format_result("inverse", matrix.Singular(0.0)),
            "Result: Inverse Matrix\n" + formatting.SINGULAR_MESSAGE,
        )
        self.assertEqual(
            formatting.format_result("cross", np.array([-3.0, 6.0, -3.0])),
            "Result: Cross Product\n[ -3.000  6.000  -3.000 ]",
        )
        self.assertEqual(formatting.format_result("cos", 0.5), "Result: Cos θ\n0.5000")
        self.assertTrue(
            formatting.format_result("adjoint", np.eye(2)).startswith("Result: Adjoint Matrix\n[ ")
        )

    def test_result_to_dict(self):
        """Test JSON-ready dictionaries."""
        self.assertEqual(
            formatting.result_to_dict("dot", 32.0),
            {"operation": "dot", "title": "Dot Product", "result": 32.0},
        )
        singular = formatting.result_to_dict("inverse", matrix.Singular(0.0))
        self.assertTrue(singular["singular"])
        self.assertIsNone(singular["result"])
        inverse = formatting.result_to_dict("inverse", np.array([[-2, 1], [1.5, -0.5]]))
        self.assertFalse(inverse["singular"])
        self.assertEqual(inverse["result"], [[-2.0, 1.0], [1.5, -0.5]])


if __name__ == "__main__":
    unittest.main()
