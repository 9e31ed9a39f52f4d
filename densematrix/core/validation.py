"""
Input validation utilities for densematrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from densematrix.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    ShapeMismatchError,
    ValidationError,
)
from densematrix.core.precision import MAX_EXACT_INTEGER


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (mixed types, ragged nesting), non-numeric
    dtypes and complex values. Integer inputs whose magnitude exceeds
    2**53 convert with precision loss and trigger a UserWarning.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64 (always a fresh copy)

    Raises:
        ValidationError: If input cannot be converted to a real float array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types, "
            f"ragged rows or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real data"
        )

    if np.issubdtype(result.dtype, np.integer) and result.size > 0:
        if result.max() > MAX_EXACT_INTEGER or result.min() < -MAX_EXACT_INTEGER:
            warnings.warn(
                f"{name}: integer values exceed 2**53 and lose precision "
                f"when converted to float64",
                UserWarning,
                stacklevel=3,
            )

    return np.array(result, dtype=np.float64, order='C')


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a matrix dimension is a non-negative integer.

    Args:
        value: Candidate row or column count
        name: Parameter name for error messages

    Returns:
        The dimension as a Python int

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__}"
        )
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return int(value)


def check_scalar(value: Any, name: str) -> float:
    """
    Verify a value is a real scalar.

    Booleans and complex numbers are rejected.

    Args:
        value: Candidate scalar
        name: Parameter name for error messages

    Returns:
        The value as a Python float

    Raises:
        ValidationError: If value is not a real number
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    return float(value)


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes.

    Args:
        left: Shape of the receiver
        right: Shape of the operand
        operation: Operation name for error messages

    Raises:
        ShapeMismatchError: If the shapes differ
    """
    if left != right:
        raise ShapeMismatchError(
            f"{operation}: operand shapes must be equal, got "
            f"{left[0]}x{left[1]} and {right[0]}x{right[1]}",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_inner_dimensions(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify the left column count matches the right row count.

    Args:
        left: Shape of the receiver
        right: Shape of the operand
        operation: Operation name for error messages

    Raises:
        ShapeMismatchError: If left[1] != right[0]
    """
    if left[1] != right[0]:
        raise ShapeMismatchError(
            f"{operation}: left operand has {left[1]} columns but right "
            f"operand has {right[0]} rows ({left[0]}x{left[1]} @ {right[0]}x{right[1]})",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_index(row: Any, column: Any, shape: tuple[int, int]) -> tuple[int, int]:
    """
    Verify a (row, column) pair addresses a cell of a matrix of the given shape.

    Negative indices are out of range; there is no wrap-around.

    Args:
        row: Row index
        column: Column index
        shape: Matrix shape (rows, columns)

    Returns:
        The indices as Python ints

    Raises:
        IndexOutOfRangeError: If either index is not an integer or is out of range
    """
    for value in (row, column):
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
            raise IndexOutOfRangeError(
                f"indices must be integers, got ({row!r}, {column!r})",
                index=(row, column),
                shape=shape,
            )
    if not (0 <= row < shape[0] and 0 <= column < shape[1]):
        raise IndexOutOfRangeError(
            f"index ({row}, {column}) out of range for {shape[0]}x{shape[1]} matrix",
            index=(row, column),
            shape=shape,
        )
    return int(row), int(column)
