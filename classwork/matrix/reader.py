# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Matrix input: the `rows,columns` dimension line, then one line per row.

Any malformed line ends the read immediately with a MatrixError. Nothing is
retried and no partially read matrix is ever returned.
"""

from classwork.console.session import ConsoleSession, InputExhaustedError
from classwork.logging.logger import get_logger
from classwork.matrix.exceptions import (
    DimensionFormatError,
    ElementParseError,
    NonPositiveDimensionError,
    RowLengthError,
)
from classwork.matrix.models import Matrix
from classwork.utils.tokens import parse_int, split_fields, split_whitespace, trim

logger = get_logger(__name__)


def parse_dimensions(line: str) -> tuple[int, int]:
    """
    Parse a `rows,columns` line. Whitespace around each number is allowed.

    Raises:
        DimensionFormatError: Not exactly two parts, or a part isn't a number.
        NonPositiveDimensionError: Either value is zero or negative.
    """
    parts = split_fields(line, ",")
    if len(parts) != 2:
        raise DimensionFormatError("Invalid dimension format for dimensions")

    try:
        rows = parse_int(trim(parts[0]))
        cols = parse_int(trim(parts[1]))
    except ValueError as err:
        raise DimensionFormatError("Invalid dimension format. Use 'rows,columns'") from err

    if rows <= 0 or cols <= 0:
        raise NonPositiveDimensionError(rows, cols)

    return rows, cols


def parse_row(line: str, cols: int, row_number: int) -> tuple[int, ...]:
    """
    Parse one whitespace-separated row of exactly `cols` integers.

    `row_number` is 1-based and only used in error messages. The length is
    checked before any value is parsed.

    Raises:
        RowLengthError: The row has the wrong number of values.
        ElementParseError: A value isn't an integer.
    """
    tokens = split_whitespace(line)
    if len(tokens) != cols:
        raise RowLengthError(cols, len(tokens), row_number)

    values: list[int] = []
    for token in tokens:
        try:
            values.append(parse_int(token))
        except ValueError as err:
            raise ElementParseError(token, row_number) from err
    return tuple(values)


def read_matrix(session: ConsoleSession, name: str) -> Matrix:
    """
    Prompt for and read one complete matrix from an open session.

    Raises:
        MatrixError: Any dimension or row problem (see parse_dimensions and
                     parse_row).
        InputExhaustedError: Input ended before the matrix was complete.
    """
    try:
        session.prompt(
            f"Enter the number of rows and columns of matrix {name} (Format: rows,columns):\n"
        )
        session.prompt(f"Matrix {name}: ")
        rows, cols = parse_dimensions(session.read_line())

        session.prompt(f"Enter elements of matrix {name} (row-wise, space separated):\n")
        matrix_rows = [
            parse_row(session.read_line(), cols, row_number)
            for row_number in range(1, rows + 1)
        ]
    except InputExhaustedError as err:
        raise InputExhaustedError(f"Unexpected end of input while reading matrix {name}") from err

    matrix = Matrix.from_rows(matrix_rows)
    logger.debug("Read matrix", extra={"matrix": name, "rows": rows, "cols": cols})
    return matrix
