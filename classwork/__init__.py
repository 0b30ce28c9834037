# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
classwork: two console exercises behind one CLI.

  - grades: max, min, average and a bar-chart histogram of student scores
  - matrix: read two integer matrices, multiply them, print the product

Both programs are single-pass and read everything from standard input.
"""

__version__ = "0.1.0"
