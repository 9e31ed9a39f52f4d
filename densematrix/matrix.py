"""
Matrix: a mutable, dense, row-major matrix of float64 values.

Every arithmetic method mutates the receiver in place and returns the
receiver, so calls chain:

    >>> m = Matrix(2, 2, 1.0)
    >>> m.scale(2).add_scalar(1)
    Matrix(rows=2, columns=2)
    [3, 3]
    [3, 3]

Only multiply() changes the shape. It computes the product from a snapshot
of the pre-call storage and then installs a freshly allocated array, so the
receiver may also appear as its own operand (``a.multiply(a)``).

Binary operators (``+``, ``-``, ``*``, ``@``, unary ``-``) work on a copy of
the left operand; augmented assignment (``+=``, ``-=``, ``*=``, ``@=``)
mutates in place and keeps object identity.
"""

from __future__ import annotations

import numbers
from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from densematrix.core.exceptions import ValidationError
from densematrix.core.precision import DEFAULT_ATOL, DEFAULT_RTOL
from densematrix.core.validation import (
    check_2d,
    check_array,
    check_dimension,
    check_index,
    check_inner_dimensions,
    check_same_shape,
    check_scalar,
)


def _format_value(value: float) -> str:
    """Shortest round-trip text of a double, without a trailing '.0'."""
    text = repr(float(value))
    if text.endswith('.0'):
        return text[:-2]
    return text


def _is_scalar(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def _check_operand(other: Any, operation: str) -> None:
    if not isinstance(other, Matrix):
        raise ValidationError(
            f"{operation}: expected a Matrix operand, got {type(other).__name__}"
        )


class Matrix:
    """
    Dense two-dimensional matrix of double-precision values.

    Storage is a C-contiguous numpy array of shape (rows, columns) owned
    exclusively by the matrix. It always holds exactly rows * columns
    initialized cells.

    Binary operators return a new matrix. Use the named methods or
    augmented assignment (``m += other``) to update a matrix that other
    references share.

    Construction:
        Matrix(rows, columns, fill=0.0)
        Matrix.create(rows, columns, fill=0.0)
        Matrix.from_rows([[1, 2], [3, 4]])
        Matrix.from_array(np_array)

    Args:
        rows: Number of rows (non-negative integer)
        columns: Number of columns (non-negative integer)
        fill: Value every cell is initialized to

    Raises:
        ValidationError: If a dimension is negative or not an integer, or
            fill is not a real number
    """

    __slots__ = ('_rows', '_columns', '_data')

    # numpy defers mixed operations to Matrix, so m == ndarray is False
    __array_ufunc__ = None

    def __init__(self, rows: int, columns: int, fill: float = 0.0):
        rows = check_dimension(rows, 'rows')
        columns = check_dimension(columns, 'columns')
        fill = check_scalar(fill, 'fill')
        self._reconstruct(rows, columns, fill)

    def _reconstruct(self, rows: int, columns: int, fill: float = 0.0) -> None:
        """Replace shape and storage with a new array of the given fill."""
        self._rows = rows
        self._columns = columns
        self._data = np.full((rows, columns), fill, dtype=np.float64)

    @classmethod
    def create(cls, rows: int, columns: int, fill: float = 0.0) -> Matrix:
        """Create a rows x columns matrix with every cell set to fill."""
        return cls(rows, columns, fill)

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """
        Build a Matrix from any 2D array-like.

        The input is validated and copied; later changes to ``array`` do not
        affect the matrix.

        Raises:
            ValidationError: If the input is not real numeric data
            DimensionError: If the input is not 2D
        """
        data = check_array(array, 'array')
        check_2d(data, 'array')
        return cls._wrap(data)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        """
        Build a Matrix from a sequence of equal-length rows.

        Raises:
            ValidationError: If rows are ragged or non-numeric
            DimensionError: If the input does not nest exactly two levels
        """
        data = check_array(rows, 'rows')
        check_2d(data, 'rows')
        return cls._wrap(data)

    @classmethod
    def _wrap(cls, data: NDArray[np.float64]) -> Matrix:
        # data must already be a private float64 C-contiguous 2D array
        matrix = cls.__new__(cls)
        matrix._rows, matrix._columns = data.shape
        matrix._data = data
        return matrix

    def copy(self) -> Matrix:
        """Independent matrix with the same shape and values."""
        return type(self)._wrap(self._data.copy())

    # --- Shape ---

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._columns

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns)."""
        return (self._rows, self._columns)

    @property
    def size(self) -> int:
        """Number of cells, rows * columns."""
        return self._data.size

    # --- Element access ---

    def get(self, row: int, column: int) -> float:
        """
        Unchecked read of cell (row, column).

        Indices must satisfy 0 <= row < rows and 0 <= column < columns.
        Nothing verifies this; out-of-range behaviour is unspecified. Use
        ``m[row, column]`` for a checked read.
        """
        return float(self._data[row, column])

    def set(self, row: int, column: int, value: float) -> None:
        """
        Unchecked write of cell (row, column).

        Same contract as get(). Use ``m[row, column] = value`` for a checked
        write.
        """
        self._data[row, column] = value

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, column = self._checked_index(index)
        return float(self._data[row, column])

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        row, column = self._checked_index(index)
        self._data[row, column] = check_scalar(value, 'value')

    def _checked_index(self, index: Any) -> tuple[int, int]:
        if not isinstance(index, tuple) or len(index) != 2:
            raise TypeError(
                f"Matrix indices must be a (row, column) pair, got {index!r}"
            )
        return check_index(index[0], index[1], self.shape)

    # --- Scalar arithmetic ---

    def add_scalar(self, d: float) -> Matrix:
        """Add d to every cell in place. Returns self."""
        d = check_scalar(d, 'd')
        self._data += d
        return self

    def subtract_scalar(self, d: float) -> Matrix:
        """Subtract d from every cell in place; same as add_scalar(-d)."""
        return self.add_scalar(-check_scalar(d, 'd'))

    def scale(self, s: float) -> Matrix:
        """Multiply every cell by s in place. Returns self."""
        s = check_scalar(s, 's')
        self._data *= s
        return self

    def negate(self) -> Matrix:
        """Flip the sign of every cell in place; same as scale(-1)."""
        return self.scale(-1)

    # --- Matrix arithmetic ---

    def add_matrix(self, other: Matrix) -> Matrix:
        """
        Elementwise addition of other into self, in place.

        Args:
            other: Matrix of the same shape (may be self)

        Returns:
            self

        Raises:
            ShapeMismatchError: If shapes differ. self is left unchanged.
        """
        _check_operand(other, 'add')
        check_same_shape(self.shape, other.shape, 'add')
        self._data += other._data
        return self

    def subtract_matrix(self, other: Matrix) -> Matrix:
        """
        Elementwise subtraction of other from self, in place.

        Args:
            other: Matrix of the same shape (may be self)

        Returns:
            self

        Raises:
            ShapeMismatchError: If shapes differ. self is left unchanged.
        """
        _check_operand(other, 'subtract')
        check_same_shape(self.shape, other.shape, 'subtract')
        self._data -= other._data
        return self

    def multiply(self, other: Matrix) -> Matrix:
        """
        Matrix product self @ other, stored back into self.

        The receiver's shape becomes (self.rows, other.columns). The product
        is computed from the pre-call storage, so other may be self.

        Args:
            other: Matrix with other.rows == self.columns

        Returns:
            self, now holding the product

        Raises:
            ShapeMismatchError: If self.columns != other.rows. self is left
                unchanged.
        """
        _check_operand(other, 'multiply')
        check_inner_dimensions(self.shape, other.shape, 'multiply')

        # Snapshot before reshaping: other may alias self
        previous = self._data
        right = other._data

        self._reconstruct(self._rows, other._columns)
        np.matmul(previous, right, out=self._data)
        return self

    # --- Comparison ---

    def equals(self, other: Any) -> bool:
        """
        Exact cellwise equality.

        True iff other is a matrix of the same concrete type, with the same
        shape and every pair of cells equal under IEEE-754 comparison. NaN
        cells never compare equal, so a matrix containing NaN is not equal
        to itself.
        """
        if type(other) is not type(self):
            return False
        if self.shape != other.shape:
            return False
        return bool(np.array_equal(self._data, other._data))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    # Mutable value object: equal matrices must not be usable as dict keys
    __hash__ = None

    def allclose(
        self,
        other: Matrix,
        rtol: float = DEFAULT_RTOL,
        atol: float = DEFAULT_ATOL,
    ) -> bool:
        """
        Approximate cellwise equality: |a - b| <= atol + rtol * |b|.

        Shapes must match exactly; a shape difference returns False.

        Raises:
            ValidationError: If other is not a Matrix
        """
        _check_operand(other, 'allclose')
        if self.shape != other.shape:
            return False
        return bool(np.allclose(self._data, other._data, rtol=rtol, atol=atol))

    # --- Export ---

    def to_array(self) -> NDArray[np.float64]:
        """Copy of the storage as a (rows, columns) float64 array."""
        return self._data.copy()

    def to_list(self) -> list[list[float]]:
        """Cells as nested Python lists, one list per row."""
        return self._data.tolist()

    # --- Rendering ---

    def __str__(self) -> str:
        return "\n".join(
            "[" + ", ".join(_format_value(v) for v in row) + "]"
            for row in self._data
        )

    def __repr__(self) -> str:
        header = f"{type(self).__name__}(rows={self._rows}, columns={self._columns})"
        body = str(self)
        return f"{header}\n{body}" if body else header

    # --- Operators ---

    def __iadd__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.add_matrix(other)
        if _is_scalar(other):
            return self.add_scalar(other)
        return NotImplemented

    def __isub__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.subtract_matrix(other)
        if _is_scalar(other):
            return self.subtract_scalar(other)
        return NotImplemented

    def __imul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.multiply(other)
        if _is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __imatmul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.multiply(other)
        return NotImplemented

    def __add__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.copy().add_matrix(other)
        if _is_scalar(other):
            return self.copy().add_scalar(other)
        return NotImplemented

    def __radd__(self, other: Any) -> Matrix:
        if _is_scalar(other):
            return self.copy().add_scalar(other)
        return NotImplemented

    def __sub__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.copy().subtract_matrix(other)
        if _is_scalar(other):
            return self.copy().subtract_scalar(other)
        return NotImplemented

    def __mul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.copy().multiply(other)
        if _is_scalar(other):
            return self.copy().scale(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Matrix:
        if _is_scalar(other):
            return self.copy().scale(other)
        return NotImplemented

    def __matmul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.copy().multiply(other)
        return NotImplemented

    def __neg__(self) -> Matrix:
        return self.copy().negate()
