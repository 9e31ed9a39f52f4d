"""
Core infrastructure for densematrix.

Shared error types, input validators and precision constants used by
Matrix and the vector helpers.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    precision: Tolerance constants for approximate comparison
"""

from densematrix.core.exceptions import (
    DenseMatrixError,
    ValidationError,
    DimensionError,
    ShapeMismatchError,
    IndexOutOfRangeError,
)
from densematrix.core.precision import (
    DEFAULT_RTOL,
    DEFAULT_ATOL,
)

__all__ = [
    # Exceptions
    "DenseMatrixError",
    "ValidationError",
    "DimensionError",
    "ShapeMismatchError",
    "IndexOutOfRangeError",
    # Precision
    "DEFAULT_RTOL",
    "DEFAULT_ATOL",
]
