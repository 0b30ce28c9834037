# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Column-aligned matrix output.

Every column shares one width, the length of the longest element text in the
whole matrix (a minus sign counts):

    |  19  22 |
    | -43 150 |
"""

from classwork.matrix.models import Matrix


def column_width(matrix: Matrix) -> int:
    """Width of the longest element, never less than 1."""
    width = 1
    for row in matrix.rows:
        for value in row:
            width = max(width, len(str(value)))
    return width


def format_matrix(matrix: Matrix) -> str:
    width = column_width(matrix)
    lines = []
    for row in matrix.rows:
        cells = "".join(f"{value:>{width}d} " for value in row)
        lines.append(f"| {cells}|")
    return "\n".join(lines) + "\n"
