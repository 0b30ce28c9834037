# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Data models for grade statistics.

The bucket ranges are fixed. The histogram footer labels them in this order,
so adding or moving a range means changing graph.FOOTER_LINES too.
"""

from dataclasses import dataclass

BUCKET_RANGES: tuple[tuple[int, int], ...] = (
    (0, 20),
    (21, 40),
    (41, 60),
    (61, 80),
    (81, 100),
)

BUCKET_COUNT: int = len(BUCKET_RANGES)


@dataclass(frozen=True)
class GradeReport:
    """
    Everything the report prints, computed in one pass over the scores.

    `buckets` only counts scores inside 0..100. Scores outside that range
    still contribute to maximum, minimum, total and count.
    """

    maximum: int
    minimum: int
    total: int
    count: int
    buckets: tuple[int, ...]

    @property
    def average(self) -> float:
        return self.total / self.count
