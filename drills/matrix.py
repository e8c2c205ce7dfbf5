"""Grid puzzles: Pascal's triangle and zeroing rows and columns."""

from __future__ import annotations

from typing import Sequence


def pascal_triangle(rows: int) -> list[list[int]]:
    """Return the first ``rows`` rows of Pascal's triangle."""
    if rows < 0:
        raise ValueError("number of rows must not be negative")
    triangle: list[list[int]] = []
    row = [1]
    for _ in range(rows):
        triangle.append(row)
        row = [1, *(a + b for a, b in zip(row, row[1:])), 1]
    return triangle


def zero_matrix(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a copy of ``matrix`` with every row and column holding a zero set to zero."""
    rows = [list(row) for row in matrix]
    if not rows:
        return []
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all rows must have the same length")
    zero_rows = {i for i, row in enumerate(rows) if 0 in row}
    zero_cols = {j for row in rows for j, value in enumerate(row) if value == 0}
    return [
        [0 if i in zero_rows or j in zero_cols else value for j, value in enumerate(row)]
        for i, row in enumerate(rows)
    ]