# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Grade statistics engine.

One pass over the scores keeps a running maximum, minimum and sum, and drops
each score into its histogram bucket. Everything here is a pure function:
same scores in, same report out.
"""

from typing import Optional, Sequence

from classwork.grades.models import BUCKET_COUNT, BUCKET_RANGES, GradeReport
from classwork.logging.logger import get_logger

logger = get_logger(__name__)


def bucket_index(score: int) -> Optional[int]:
    """Return which bucket `score` belongs to, or None if it's outside 0..100."""
    for index, (low, high) in enumerate(BUCKET_RANGES):
        if low <= score <= high:
            return index
    return None


def compute_report(scores: Sequence[int]) -> GradeReport:
    """
    Compute max, min, sum and the bucket counts for a non-empty score list.

    Raises:
        ValueError: If `scores` is empty. There is no meaningful average
                    of nothing, and the CLI never asks for one.
    """
    if not scores:
        raise ValueError("Cannot compute statistics for an empty score list")

    maximum = minimum = scores[0]
    total = 0
    buckets = [0] * BUCKET_COUNT

    for score in scores:
        total += score
        if score > maximum:
            maximum = score
        if score < minimum:
            minimum = score

        index = bucket_index(score)
        if index is not None:
            buckets[index] += 1

    uncounted = len(scores) - sum(buckets)
    if uncounted:
        logger.info(
            "Scores outside 0-100 left out of the histogram",
            extra={"uncounted": uncounted},
        )

    return GradeReport(
        maximum=maximum,
        minimum=minimum,
        total=total,
        count=len(scores),
        buckets=tuple(buckets),
    )
