"""Input normalization and random demo inputs.

Numbers typed by the user are coerced to floats, with anything that does not
parse (empty cells, stray text, NaN) becoming 0. Matrices and vectors are
padded with zeros when entries are missing.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Optional, Sequence, Tuple, Union

import numpy as np

logger = logging.getLogger(__name__)

MATRIX_SIZES = (2, 3, 4, 5)

_ROW_SEP = re.compile(r"[;\n]")
_CELL_SEP = re.compile(r"[\s,]+")
_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def check_size(size: int) -> int:
    """Validate a matrix size against the supported sizes."""
    if size not in MATRIX_SIZES:
        raise ValueError(f"Matrix size must be one of {MATRIX_SIZES}, got {size}")
    return size


def parse_number(text) -> float:
    """Parse a single entry, returning 0.0 for anything unparsable.

    Text is read up to the end of its leading number, so "3abc" gives 3 and
    "abc" gives 0.

    Args:
        text: String or number

    Returns:
        Finite float value
    """
    if isinstance(text, (int, float)) and not isinstance(text, bool):
        value = float(text)
    else:
        stripped = str(text).strip()
        match = _LEADING_NUMBER.match(stripped)
        if match is None:
            if stripped:
                logger.warning(f"Could not parse {text!r} as a number, using 0")
            return 0.0
        if match.end() < len(stripped):
            logger.debug(f"Ignoring trailing text in {text!r}")
        value = float(match.group())

    if not math.isfinite(value):
        logger.warning(f"Non-finite entry {text!r}, using 0")
        return 0.0
    return value


def _split_cells(text: str) -> list:
    text = text.strip()
    if not text:
        return []
    return _CELL_SEP.split(text)


def parse_vector(values: Union[str, Sequence]) -> np.ndarray:
    """Parse a 3-vector from text like "1, 2, 3" or from a sequence.

    Missing entries are filled with 0.

    Args:
        values: Comma/whitespace separated text, or a sequence of entries

    Returns:
        Array of shape (3,)
    """
    cells = _split_cells(values) if isinstance(values, str) else list(values)
    if len(cells) > 3:
        raise ValueError(f"Expected at most 3 vector entries, got {len(cells)}")

    vec = np.zeros(3)
    for i, cell in enumerate(cells):
        vec[i] = parse_number(cell)
    return vec


def parse_matrix(values: Union[str, Sequence], size: int) -> np.ndarray:
    """Parse a size x size matrix.

    Text input has rows separated by ";" or newlines and entries separated by
    commas or whitespace, e.g. "1 2; 3 4". Short rows and missing rows are
    padded with 0.

    Args:
        values: Matrix text, or a sequence of row sequences
        size: Matrix dimension

    Returns:
        size x size float array
    """
    check_size(size)
    if isinstance(values, str):
        rows = [_split_cells(r) for r in _ROW_SEP.split(values) if r.strip()]
    else:
        rows = [list(r) for r in values]

    if len(rows) > size:
        raise ValueError(f"Expected at most {size} rows, got {len(rows)}")

    M = np.zeros((size, size))
    for i, row in enumerate(rows):
        if len(row) > size:
            raise ValueError(f"Row {i} has {len(row)} entries, expected at most {size}")
        for j, cell in enumerate(row):
            M[i, j] = parse_number(cell)
    return M


def parse_row(values: Union[str, Sequence], size: int) -> np.ndarray:
    """Parse a single matrix row of at most size entries, padded with 0.

    Args:
        values: Row text such as "1 2 3", or a sequence of entries
        size: Matrix dimension

    Returns:
        Array of shape (size,)
    """
    if isinstance(values, str):
        rows = [r for r in _ROW_SEP.split(values) if r.strip()]
        if len(rows) > 1:
            raise ValueError(f"Expected a single row, got {len(rows)}")
        values = rows[0] if rows else ""
        cells = _split_cells(values)
    else:
        cells = list(values)
    return parse_matrix([cells], size)[0]


def zero_matrix(size: int) -> np.ndarray:
    """Return a cleared size x size matrix."""
    return np.zeros((check_size(size), size))


def zero_vector() -> np.ndarray:
    """Return a cleared 3-vector."""
    return np.zeros(3)


def random_matrix(
    size: int,
    low: int = -10,
    high: int = 10,
    rng: Optional[np.random.Generator] = None
) -> np.ndarray:
    """Generate a random integer-valued matrix for demonstrations.

    One randomly chosen entry is always set to 0.

    Args:
        size: Matrix dimension
        low: Smallest entry value (inclusive)
        high: Largest entry value (inclusive)
        rng: Random generator (a fresh unseeded one if None)

    Returns:
        size x size float array
    """
    check_size(size)
    if low > high:
        raise ValueError(f"Invalid random range [{low}, {high}]")
    rng = rng if rng is not None else np.random.default_rng()

    M = rng.integers(low, high, size=(size, size), endpoint=True).astype(float)
    row, col = rng.integers(0, size, size=2)
    M[row, col] = 0.0

    logger.debug(f"Generated random {size}x{size} matrix, zero at ({row}, {col})")
    return M


def random_vectors(
    low: int = -10,
    high: int = 10,
    rng: Optional[np.random.Generator] = None
) -> Tuple[np.ndarray, np.ndarray]:
    """Generate a pair of random integer-valued 3-vectors."""
    if low > high:
        raise ValueError(f"Invalid random range [{low}, {high}]")
    rng = rng if rng is not None else np.random.default_rng()

    v1 = rng.integers(low, high, size=3, endpoint=True).astype(float)
    v2 = rng.integers(low, high, size=3, endpoint=True).astype(float)
    return v1, v2
