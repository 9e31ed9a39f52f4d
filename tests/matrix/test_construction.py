"""
Tests for Matrix construction, shape accessors and copies.
"""

import numpy as np
import pytest

from densematrix import Matrix
from densematrix.core.exceptions import DimensionError, ValidationError


class TestCreate:
    """Matrix(rows, columns, fill) initializes every cell."""

    def test_default_fill_is_zero(self):
        m = Matrix(2, 3)
        assert m.shape == (2, 3)
        np.testing.assert_array_equal(m.to_array(), np.zeros((2, 3)))

    def test_explicit_fill(self):
        m = Matrix(3, 2, 1.5)
        np.testing.assert_array_equal(m.to_array(), np.full((3, 2), 1.5))

    def test_create_factory(self):
        m = Matrix.create(2, 2, fill=7.0)
        assert isinstance(m, Matrix)
        assert m.to_list() == [[7.0, 7.0], [7.0, 7.0]]

    def test_integer_fill_stored_as_float(self):
        m = Matrix(1, 1, 3)
        assert isinstance(m.get(0, 0), float)

    @pytest.mark.parametrize("rows, columns", [(0, 0), (0, 4), (4, 0)])
    def test_empty_shapes(self, rows, columns):
        m = Matrix(rows, columns)
        assert m.rows == rows
        assert m.columns == columns
        assert m.size == 0

    def test_negative_rows_rejected(self):
        with pytest.raises(ValidationError, match="rows"):
            Matrix(-1, 2)

    def test_negative_columns_rejected(self):
        with pytest.raises(ValidationError, match="columns"):
            Matrix(2, -3)

    def test_float_dimension_rejected(self):
        with pytest.raises(ValidationError):
            Matrix(2.0, 2)

    def test_non_numeric_fill_rejected(self):
        with pytest.raises(ValidationError, match="fill"):
            Matrix(2, 2, "x")


class TestFromRows:

    def test_values_and_shape(self):
        m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        assert m.shape == (2, 3)
        assert m.get(1, 2) == 6.0

    def test_ragged_rows_rejected(self):
        with pytest.raises(ValidationError):
            Matrix.from_rows([[1.0, 2.0], [3.0]])

    def test_flat_sequence_rejected(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            Matrix.from_rows([1.0, 2.0, 3.0])

    def test_empty_row_list(self):
        m = Matrix.from_rows([[], []])
        assert m.shape == (2, 0)


class TestFromArray:

    def test_copies_input(self):
        arr = np.arange(6.0).reshape(2, 3)
        m = Matrix.from_array(arr)
        arr[0, 0] = 99.0
        assert m.get(0, 0) == 0.0

    def test_fortran_order_input(self):
        arr = np.asfortranarray(np.arange(6.0).reshape(2, 3))
        m = Matrix.from_array(arr)
        assert m.to_list() == [[0.0, 1.0, 2.0], [3.0, 4.0, 5.0]]

    def test_three_dimensional_rejected(self):
        with pytest.raises(DimensionError):
            Matrix.from_array(np.zeros((2, 2, 2)))

    def test_string_input_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            Matrix.from_array([["a", "b"]])

    def test_large_integers_warn(self):
        with pytest.warns(UserWarning, match="lose precision"):
            Matrix.from_array(np.array([[2 ** 62, 1]], dtype=np.int64))


class TestShapeInvariant:
    """Storage always holds exactly rows * columns cells."""

    def test_size_matches_shape(self, random_matrix):
        assert random_matrix.size == random_matrix.rows * random_matrix.columns

    def test_after_each_operation(self, rng):
        m = Matrix.from_array(rng.standard_normal((3, 4)))
        other = Matrix.from_array(rng.standard_normal((3, 4)))
        right = Matrix.from_array(rng.standard_normal((4, 2)))
        for op in (
            lambda: m.add_scalar(1.0),
            lambda: m.subtract_scalar(2.0),
            lambda: m.scale(0.5),
            lambda: m.negate(),
            lambda: m.add_matrix(other),
            lambda: m.subtract_matrix(other),
            lambda: m.multiply(right),
        ):
            op()
            assert m.size == m.rows * m.columns
            assert m.to_array().shape == m.shape
        assert m.shape == (3, 2)


class TestCopy:

    def test_copy_is_equal(self, a22):
        assert a22.copy() == a22

    def test_copy_is_independent(self, a22):
        c = a22.copy()
        c.add_scalar(10.0)
        assert a22.to_list() == [[1.0, 2.0], [3.0, 4.0]]

    def test_to_array_is_a_copy(self, a22):
        arr = a22.to_array()
        arr[0, 0] = -1.0
        assert a22.get(0, 0) == 1.0
