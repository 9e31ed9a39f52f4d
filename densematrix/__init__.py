"""
densematrix: mutable dense float64 matrices with in-place arithmetic.

A small building block for numerical code (graphics transforms, neural
network layers) that needs row/column indexed double-precision storage.

Public API:
    Matrix      - dense matrix; arithmetic mutates in place and returns self
    dot(x, y)   - dot product of two equal-length vectors
"""

__version__ = "0.1.0"

from densematrix.matrix import Matrix
from densematrix.vector import dot
from densematrix.core.exceptions import (
    DenseMatrixError,
    ValidationError,
    DimensionError,
    ShapeMismatchError,
    IndexOutOfRangeError,
)

__all__ = [
    "__version__",
    "Matrix",
    "dot",
    "DenseMatrixError",
    "ValidationError",
    "DimensionError",
    "ShapeMismatchError",
    "IndexOutOfRangeError",
]
