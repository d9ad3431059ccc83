"""Matrix and vector calculator.

A small linear algebra engine for 2x2 to 5x5 matrices (determinant, transpose,
adjoint, inverse) and 3D vectors (dot and cross products, angle cosine and
sine), computed by straightforward cofactor expansion so every step can be
followed by hand.
"""

from __future__ import annotations

__version__ = "0.1.0"
