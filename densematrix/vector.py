"""
Vector helpers.

dot() works on plain numeric sequences and is independent of Matrix.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from densematrix.core.exceptions import DimensionError
from densematrix.core.validation import check_1d, check_array


def dot(x: ArrayLike, y: ArrayLike) -> float:
    """
    Sum of elementwise products of two equal-length vectors.

    Args:
        x: 1D numeric sequence
        y: 1D numeric sequence of the same length

    Returns:
        sum(x[k] * y[k]) as a Python float; 0.0 for two empty vectors

    Raises:
        ValidationError: If either input is not real numeric data
        DimensionError: If either input is not 1D or the lengths differ
    """
    x = check_array(x, 'x')
    y = check_array(y, 'y')
    check_1d(x, 'x')
    check_1d(y, 'y')

    if x.shape[0] != y.shape[0]:
        raise DimensionError(
            f"Vector lengths don't match: x has {x.shape[0]} elements, "
            f"y has {y.shape[0]}"
        )

    return float(np.dot(x, y))
