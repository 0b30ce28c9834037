# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Matrix multiplication.

For A (n×m) and B (m×p), C[i][j] is the dot product of row i of A and
column j of B. Plain triple loop: the inputs are typed in by hand, so they
are tiny.
"""

from classwork.logging.logger import get_logger
from classwork.matrix.exceptions import DimensionMismatchError
from classwork.matrix.models import Matrix

logger = get_logger(__name__)


def check_compatible(left: Matrix, right: Matrix) -> None:
    """
    Raises:
        DimensionMismatchError: If columns of `left` != rows of `right`.
    """
    if left.column_count != right.row_count:
        raise DimensionMismatchError(left.column_count, right.row_count)


def multiply(left: Matrix, right: Matrix) -> Matrix:
    """
    Multiply two matrices.

    Raises:
        DimensionMismatchError: If the shapes aren't compatible. Nothing is
                                computed in that case.
    """
    check_compatible(left, right)

    n = left.row_count
    m = left.column_count
    p = right.column_count

    result = [[0] * p for _ in range(n)]
    for i in range(n):
        for j in range(p):
            for k in range(m):
                result[i][j] += left.rows[i][k] * right.rows[k][j]

    logger.debug(
        "Multiplied matrices",
        extra={"left_shape": left.shape, "right_shape": right.shape, "result_shape": (n, p)},
    )
    return Matrix.from_rows(result)
