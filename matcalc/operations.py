"""Named calculator operations.

Maps the operation names offered by the front end to engine functions, so a
caller can dispatch on a string such as "inverse" or "cross".
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict

from matcalc import matrix, vector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Operation:
    """A calculator operation.

    Attributes:
        name: Short name used on the command line
        title: Display title for the result panel
        func: Engine function implementing it
    """

    name: str
    title: str
    func: Callable


MATRIX_OPERATIONS: Dict[str, Operation] = {
    op.name: op for op in (
        Operation("determinant", "Determinant", matrix.determinant),
        Operation("transpose", "Transpose", matrix.transpose),
        Operation("adjoint", "Adjoint Matrix", matrix.adjoint),
        Operation("inverse", "Inverse Matrix", matrix.inverse),
    )
}

VECTOR_OPERATIONS: Dict[str, Operation] = {
    op.name: op for op in (
        Operation("dot", "Dot Product", vector.dot),
        Operation("cross", "Cross Product", vector.cross),
        Operation("cos", "Cos θ", vector.cos_angle),
        Operation("sin", "Sin θ", vector.sin_angle),
    )
}


def get_operation(name: str) -> Operation:
    """Look up a matrix or vector operation by name."""
    if name in MATRIX_OPERATIONS:
        return MATRIX_OPERATIONS[name]
    if name in VECTOR_OPERATIONS:
        return VECTOR_OPERATIONS[name]
    raise ValueError(f"Unknown operation: {name}")


def run_matrix_operation(name: str, M, **kwargs):
    """Run a matrix operation by name.

    Args:
        name: One of MATRIX_OPERATIONS
        M: Square matrix
        **kwargs: Extra arguments for the engine function (e.g. eps for inverse)

    Returns:
        Float, matrix, or matrix.Singular for a singular inverse
    """
    if name not in MATRIX_OPERATIONS:
        raise ValueError(f"Unknown matrix operation: {name}")

    start_time = time.perf_counter()
    result = MATRIX_OPERATIONS[name].func(M, **kwargs)
    elapsed_time = time.perf_counter() - start_time
    logger.debug(f"{name}: done in {elapsed_time * 1e3:.3f}ms")
    return result


def run_vector_operation(name: str, v1, v2):
    """Run a vector operation by name.

    Args:
        name: One of VECTOR_OPERATIONS
        v1: First 3-vector
        v2: Second 3-vector

    Returns:
        Float, or a 3-vector for the cross product
    """
    if name not in VECTOR_OPERATIONS:
        raise ValueError(f"Unknown vector operation: {name}")

    start_time = time.perf_counter()
    result = VECTOR_OPERATIONS[name].func(v1, v2)
    elapsed_time = time.perf_counter() - start_time
    logger.debug(f"{name}: done in {elapsed_time * 1e3:.3f}ms")
    return result
