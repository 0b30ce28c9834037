# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Tests for column-aligned matrix output."""

from classwork.matrix.models import Matrix
from classwork.matrix.printer import column_width, format_matrix


class TestColumnWidth:
    def test_single_digits(self) -> None:
        assert column_width(Matrix.from_rows([[0, 1], [2, 3]])) == 1

    def test_minus_sign_counts(self) -> None:
        assert column_width(Matrix.from_rows([[5, -12]])) == 3

    def test_longest_text_wins(self) -> None:
        assert column_width(Matrix.from_rows([[-9], [1000]])) == 4


class TestFormatMatrix:
    def test_known_product_layout(self) -> None:
        matrix = Matrix.from_rows([[19, 22], [43, 50]])
        assert format_matrix(matrix) == "| 19 22 |\n| 43 50 |\n"

    def test_shared_width_right_aligned(self) -> None:
        matrix = Matrix.from_rows([[1, -100], [20, 3]])
        assert format_matrix(matrix) == "|    1 -100 |\n|   20    3 |\n"

    def test_single_element(self) -> None:
        assert format_matrix(Matrix.from_rows([[7]])) == "| 7 |\n"
