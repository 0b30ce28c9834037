# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Grade statistics package.

Reads one line of scores and reports the maximum, minimum and average grade,
followed by a text histogram of how the scores fall into five ranges.

Subsystems:
  - parser: turning the score line into integers
  - statistics: the single pass that builds a GradeReport
  - graph: rendering the report and the histogram as text
"""
