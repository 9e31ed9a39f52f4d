"""
Tests for str() and repr() rendering.
"""

from densematrix import Matrix


class TestStr:

    def test_single_row(self):
        assert str(Matrix.from_rows([[6.0, 9.0]])) == "[6, 9]"

    def test_rows_on_separate_lines(self, a22):
        assert str(a22) == "[1, 2]\n[3, 4]"

    def test_no_trailing_newline(self, a22):
        assert not str(a22).endswith("\n")

    def test_fractional_values(self):
        assert str(Matrix.from_rows([[0.5, -1.25]])) == "[0.5, -1.25]"

    def test_shortest_round_trip(self):
        assert str(Matrix(1, 1, 0.1)) == "[0.1]"
        assert str(Matrix(1, 1, 1.0 / 3.0)) == "[0.3333333333333333]"

    def test_negative_zero(self):
        assert str(Matrix(1, 1, -0.0)) == "[-0]"

    def test_large_and_special_values(self):
        m = Matrix.from_rows([[1e20, float("inf"), float("-inf"), float("nan")]])
        assert str(m) == "[1e+20, inf, -inf, nan]"

    def test_zero_rows_renders_empty(self):
        assert str(Matrix(0, 3)) == ""

    def test_zero_columns_renders_empty_brackets(self):
        assert str(Matrix(2, 0)) == "[]\n[]"


class TestRepr:

    def test_header_and_body(self, a22):
        assert repr(a22) == "Matrix(rows=2, columns=2)\n[1, 2]\n[3, 4]"

    def test_empty_matrix(self):
        assert repr(Matrix(0, 0)) == "Matrix(rows=0, columns=0)"
