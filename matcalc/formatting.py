"""Display formatting for calculator results."""

from __future__ import annotations

from typing import Dict, List

import numpy as np
from numpy import typing as npt

from matcalc.matrix import Singular
from matcalc.operations import get_operation

SINGULAR_MESSAGE = "Matrix is singular (determinant = 0). Inverse does not exist."


def format_scalar(x: float, decimals: int = 4) -> str:
    """Format a number with a fixed number of decimals, without "-0.000"."""
    text = f"{x:.{decimals}f}"
    if float(text) == 0:
        text = f"{0.0:.{decimals}f}"
    return text


def format_vector(v: npt.ArrayLike, decimals: int = 3) -> str:
    """Format a vector as a single bracketed row."""
    cells = [format_scalar(x, decimals) for x in np.asarray(v, dtype=float)]
    return "[ " + "  ".join(cells) + " ]"


def format_matrix(M: npt.ArrayLike, decimals: int = 3) -> str:
    """Format a matrix as a right-aligned text grid.

    Args:
        M: 2D matrix
        decimals: Decimals per entry

    Returns:
        Multi-line string, one bracketed line per row
    """
    A = np.asarray(M, dtype=float)
    cells = [[format_scalar(x, decimals) for x in row] for row in A]
    width = max((len(c) for row in cells for c in row), default=0)

    lines = []
    for row in cells:
        lines.append("[ " + "  ".join(c.rjust(width) for c in row) + " ]")
    return "\n".join(lines)


def format_result(
    name: str,
    result,
    scalar_decimals: int = 4,
    matrix_decimals: int = 3
) -> str:
    """Render an operation result as text, headed by the operation title.

    Args:
        name: Operation name (e.g. "determinant", "cross")
        result: Value returned by the operation
        scalar_decimals: Decimals for scalar results
        matrix_decimals: Decimals for matrix and vector entries

    Returns:
        Display text
    """
    title = get_operation(name).title
    header = f"Result: {title}"

    if isinstance(result, Singular):
        body = SINGULAR_MESSAGE
    elif name == "determinant":
        body = f"det(A) = {format_scalar(result, scalar_decimals)}"
    elif np.ndim(result) == 0:
        body = format_scalar(result, scalar_decimals)
    elif np.ndim(result) == 1:
        body = format_vector(result, matrix_decimals)
    else:
        body = format_matrix(result, matrix_decimals)

    return f"{header}\n{body}"


def result_to_dict(name: str, result) -> Dict:
    """Convert an operation result into a JSON-serializable dictionary."""
    out: Dict = {"operation": name, "title": get_operation(name).title}
    if isinstance(result, Singular):
        out["singular"] = True
        out["determinant"] = float(result.determinant)
        out["result"] = None
    elif np.ndim(result) == 0:
        out["result"] = float(result)
    else:
        value: List = np.asarray(result, dtype=float).tolist()
        out["result"] = value
    if name == "inverse" and "singular" not in out:
        out["singular"] = False
    return out
