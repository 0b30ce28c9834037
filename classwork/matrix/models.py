# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
The Matrix type.

Matrices are frozen dataclasses over tuples of row tuples. Once read, a
matrix never changes, and the constructor refuses anything that isn't a
non-empty rectangle.
"""

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Matrix:
    """A non-empty, rectangular matrix of integers, stored row by row."""

    rows: tuple[tuple[int, ...], ...]

    def __post_init__(self) -> None:
        if not self.rows:
            raise ValueError("A matrix needs at least one row")
        width = len(self.rows[0])
        if width == 0:
            raise ValueError("A matrix needs at least one column")
        for index, row in enumerate(self.rows, start=1):
            if len(row) != width:
                raise ValueError(f"Row {index} has {len(row)} values, expected {width}")

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]]) -> "Matrix":
        return cls(tuple(tuple(row) for row in rows))

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.rows[0])

    @property
    def shape(self) -> tuple[int, int]:
        return self.row_count, self.column_count

    def to_lists(self) -> list[list[int]]:
        return [list(row) for row in self.rows]
