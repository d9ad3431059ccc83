"""Square matrix operations by cofactor expansion.

This module implements the matrix half of the calculator engine: determinant
by recursive Laplace expansion, transpose, cofactors, the adjoint (adjugate)
and the inverse built from the adjoint. Matrices are small (N <= 5), so the
O(N!) expansion is used directly instead of a factorization.

Every function returns a new array and leaves its input untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

import numpy as np
from numpy import typing as npt

logger = logging.getLogger(__name__)

# Determinants with a smaller magnitude are treated as zero by inverse()
SINGULAR_EPS = 1e-10


@dataclass(frozen=True)
class Singular:
    """Marker returned by inverse() when the matrix has no inverse.

    Attributes:
        determinant: The determinant that fell below the singularity threshold
    """

    determinant: float


InverseResult = Union[np.ndarray, Singular]


def _as_square(M: npt.ArrayLike) -> np.ndarray:
    """Convert input to a float array and check that it is square."""
    A = np.array(M, dtype=float)
    if A.ndim != 2 or A.shape[0] != A.shape[1] or A.shape[0] == 0:
        raise ValueError(f"Expected non-empty NxN matrix, got shape {A.shape}")
    return A


def identity(n: int) -> np.ndarray:
    """Return the n x n identity matrix."""
    if n < 1:
        raise ValueError(f"Matrix size must be positive, got {n}")
    return np.eye(n)


def minor(M: npt.ArrayLike, row: int, col: int) -> np.ndarray:
    """Extract the minor obtained by deleting one row and one column.

    Args:
        M: NxN matrix with N >= 2
        row: Index of the row to delete
        col: Index of the column to delete

    Returns:
        (N-1)x(N-1) matrix
    """
    A = _as_square(M)
    n = A.shape[0]
    if n < 2:
        raise ValueError("Cannot take a minor of a 1x1 matrix")
    if not (0 <= row < n and 0 <= col < n):
        raise ValueError(f"Minor index ({row}, {col}) out of range for {n}x{n} matrix")

    keep_rows = [i for i in range(n) if i != row]
    keep_cols = [j for j in range(n) if j != col]
    return A[np.ix_(keep_rows, keep_cols)]


def determinant(M: npt.ArrayLike) -> float:
    """Compute the determinant by Laplace expansion along the first row.

    Args:
        M: NxN matrix

    Returns:
        Determinant as a float
    """
    A = _as_square(M)
    n = A.shape[0]

    if n == 1:
        return float(A[0, 0])
    if n == 2:
        return float(A[0, 0] * A[1, 1] - A[0, 1] * A[1, 0])

    det = 0.0
    for j in range(n):
        sign = 1.0 if j % 2 == 0 else -1.0
        det += sign * A[0, j] * determinant(minor(A, 0, j))
    return float(det)


def transpose(M: npt.ArrayLike) -> np.ndarray:
    """Return the transpose of a 2D matrix, result[i][j] = M[j][i].

    Works for rectangular matrices as well as square ones.
    """
    A = np.array(M, dtype=float)
    if A.ndim != 2:
        raise ValueError(f"Expected 2D matrix, got shape {A.shape}")
    return A.T.copy()


def cofactor(M: npt.ArrayLike, row: int, col: int) -> float:
    """Signed determinant of the (row, col) minor.

    Args:
        M: NxN matrix with N >= 2
        row: Row index
        col: Column index

    Returns:
        (-1)^(row+col) * det(minor(M, row, col))
    """
    sign = 1.0 if (row + col) % 2 == 0 else -1.0
    return sign * determinant(minor(M, row, col))


def cofactor_matrix(M: npt.ArrayLike) -> np.ndarray:
    """Build the matrix C with C[i][j] = cofactor(M, i, j)."""
    A = _as_square(M)
    n = A.shape[0]
    C = np.zeros((n, n))
    for i in range(n):
        for j in range(n):
            C[i, j] = cofactor(A, i, j)
    return C


def adjoint(M: npt.ArrayLike) -> np.ndarray:
    """Compute the adjoint (adjugate) matrix, the transpose of the cofactor matrix.

    The adjoint of a 1x1 matrix is taken to be [[1]].

    Args:
        M: NxN matrix

    Returns:
        NxN adjoint matrix
    """
    A = _as_square(M)
    if A.shape[0] == 1:
        return np.ones((1, 1))
    return transpose(cofactor_matrix(A))


def inverse(M: npt.ArrayLike, eps: float = SINGULAR_EPS) -> InverseResult:
    """Invert a matrix as adj(M) / det(M).

    A matrix whose determinant magnitude is below eps has no inverse. This is
    not an error: a Singular marker is returned instead of a matrix, and
    callers must check for it before using the result.

    Args:
        M: NxN matrix
        eps: Singularity threshold on |det(M)|

    Returns:
        NxN inverse matrix, or Singular
    """
    A = _as_square(M)
    d = determinant(A)
    if abs(d) < eps:
        logger.debug(f"Matrix is singular: det={d:.3e} < eps={eps:.1e}")
        return Singular(determinant=d)

    inv = adjoint(A) / d
    logger.debug(f"Inverted {A.shape[0]}x{A.shape[0]} matrix: det={d:.5f}")
    return inv


def is_singular(result: InverseResult) -> bool:
    """Check whether an inverse() result is the singular marker."""
    return isinstance(result, Singular)
