# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Matrix multiplication package.

Reads two integer matrices (dimensions first, then rows), checks that they
can be multiplied, multiplies them and prints the product with aligned
columns.

Subsystems:
  - models: the immutable Matrix type
  - reader: dimension and row parsing, and the interactive read loop
  - operations: compatibility check and multiplication
  - printer: column-aligned text output
"""
