# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Text rendering for the grade report and its histogram.

The histogram is drawn top-down: one row per level from the tallest bucket
down to 1, so bars grow upward from the footer. Each bucket is an 11-column
cell, filled with a 7-character bar when the bucket reaches that level.

     3 >    #######
     2 >    #######               #######
     1 >    #######    #######    #######
        +------------+----------+----------+----------+----------+
        I    0-20    I   21-40  I   41-60  I   61-80  I   81-100 I
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from classwork.grades.models import GradeReport

FILLED_CELL = "    #######"
EMPTY_CELL = " " * len(FILLED_CELL)

FOOTER_LINES: tuple[str, str] = (
    "    +------------+----------+----------+----------+----------+",
    "    I    0-20    I   21-40  I   41-60  I   61-80  I   81-100 I",
)

_SIX_PLACES = Decimal("0.000001")


def render_graph_rows(buckets: Sequence[int]) -> list[str]:
    """One row per level, tallest first. Empty when every bucket is zero."""
    tallest = max(buckets, default=0)
    rows: list[str] = []
    for level in range(tallest, 0, -1):
        cells = "".join(FILLED_CELL if count >= level else EMPTY_CELL for count in buckets)
        rows.append(f"{level:2d} >{cells}")
    return rows


def format_average(average: float) -> str:
    """
    Six decimal places, ties rounded away from zero.

    Rounding starts from the shortest repr of the float, so 75.1328125 prints
    as 75.132813 where the "%.6f" format would give 75.132812.
    """
    rounded = Decimal(repr(average)).quantize(_SIX_PLACES, rounding=ROUND_HALF_UP)
    return format(rounded, "f")


def render_graph(buckets: Sequence[int]) -> str:
    lines = render_graph_rows(buckets) + list(FOOTER_LINES)
    return "\n".join(lines) + "\n"


def render_report(report: GradeReport) -> str:
    """
    Render the full report exactly as the grades command prints it.

    The average always shows six decimal places.
    """
    summary = (
        f"\nThe maximum grade is {report.maximum}\n"
        f"The minimum grade is {report.minimum}\n"
        f"The average grade is {format_average(report.average)}\n"
    )
    return summary + "\n\nGraph:\n\n" + render_graph(report.buckets)
