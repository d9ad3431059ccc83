"""Three-dimensional vector operations.

Dot and cross products, magnitude, and the cosine/sine of the angle between
two vectors. The angle between a zero vector and anything else is undefined;
cos_angle() and sin_angle() return 0 in that case rather than raising.
"""

from __future__ import annotations

import logging
import math

import numpy as np
from numpy import typing as npt

logger = logging.getLogger(__name__)


def _as_vec3(v: npt.ArrayLike) -> np.ndarray:
    a = np.array(v, dtype=float)
    if a.shape != (3,):
        raise ValueError(f"Expected 3-vector, got shape {a.shape}")
    return a


def dot(v1: npt.ArrayLike, v2: npt.ArrayLike) -> float:
    """Dot product of two 3-vectors."""
    a = _as_vec3(v1)
    b = _as_vec3(v2)
    return float(a[0] * b[0] + a[1] * b[1] + a[2] * b[2])


def cross(v1: npt.ArrayLike, v2: npt.ArrayLike) -> np.ndarray:
    """Cross product v1 x v2 of two 3-vectors.

    Args:
        v1: First vector (x, y, z)
        v2: Second vector (x, y, z)

    Returns:
        3-vector orthogonal to both inputs
    """
    a = _as_vec3(v1)
    b = _as_vec3(v2)
    return np.array([
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    ])


def magnitude(v: npt.ArrayLike) -> float:
    """Euclidean length of a 3-vector."""
    a = _as_vec3(v)
    return math.sqrt(a[0] ** 2 + a[1] ** 2 + a[2] ** 2)


def cos_angle(v1: npt.ArrayLike, v2: npt.ArrayLike) -> float:
    """Cosine of the angle between two 3-vectors.

    Returns 0 when either vector has zero magnitude.

    Args:
        v1: First vector
        v2: Second vector

    Returns:
        dot(v1, v2) / (|v1| |v2|), or 0 for a zero vector
    """
    mag1 = magnitude(v1)
    mag2 = magnitude(v2)
    if mag1 == 0 or mag2 == 0:
        logger.debug("cos_angle: zero-length vector, returning 0")
        return 0.0
    return dot(v1, v2) / (mag1 * mag2)


def sin_angle(v1: npt.ArrayLike, v2: npt.ArrayLike) -> float:
    """Sine of the angle between two 3-vectors.

    Returns 0 when either vector has zero magnitude.

    Args:
        v1: First vector
        v2: Second vector

    Returns:
        |v1 x v2| / (|v1| |v2|), or 0 for a zero vector
    """
    mag1 = magnitude(v1)
    mag2 = magnitude(v2)
    if mag1 == 0 or mag2 == 0:
        logger.debug("sin_angle: zero-length vector, returning 0")
        return 0.0
    return magnitude(cross(v1, v2)) / (mag1 * mag2)
