# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Exceptions raised while reading or multiplying matrices.

The message of every exception here is what the user sees after "Error: ",
so keep them short and specific.
"""


class MatrixError(Exception):
    """Base for all matrix input and multiplication errors."""


class DimensionError(MatrixError):
    """The `rows,columns` line couldn't be turned into a valid shape."""


class DimensionFormatError(DimensionError):
    """The dimension line doesn't have two numeric comma-separated parts."""


class NonPositiveDimensionError(DimensionError):
    """Rows or columns is zero or negative."""

    def __init__(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols
        super().__init__("Rows and columns must be positive integers")


class RowLengthError(MatrixError):
    """A row has a different number of values than the declared column count."""

    def __init__(self, expected: int, actual: int, row_number: int) -> None:
        self.expected = expected
        self.actual = actual
        self.row_number = row_number
        super().__init__(f"Expected {expected} values for row {row_number}, got {actual}")


class ElementParseError(MatrixError):
    """A row contains a value that isn't an integer."""

    def __init__(self, token: str, row_number: int) -> None:
        self.token = token
        self.row_number = row_number
        super().__init__(f'For input string: "{token}"')


class DimensionMismatchError(MatrixError):
    """Columns of the left matrix don't match rows of the right matrix."""

    def __init__(self, left_cols: int, right_rows: int) -> None:
        self.left_cols = left_cols
        self.right_rows = right_rows
        super().__init__(
            f"Matrix multiplication not possible. Columns of A ({left_cols}) "
            f"must equal rows of B ({right_rows})."
        )
