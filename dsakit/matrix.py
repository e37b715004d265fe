"""Matrix addition, subtraction, multiplication and element sums."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


class MatrixShapeError(ValueError):
    """Matrix dimensions do not allow the operation."""


def _shape(m: Matrix) -> tuple[int, int]:
    rows = len(m)
    cols = len(m[0]) if rows else 0
    if any(len(row) != cols for row in m):
        raise MatrixShapeError("matrix rows have different lengths")
    return rows, cols


def _same_shape(a: Matrix, b: Matrix, action: str) -> None:
    if _shape(a) != _shape(b):
        raise MatrixShapeError(f"{action} not possible: shapes differ")


def add(a: Matrix, b: Matrix) -> list[list[int]]:
    """Element-wise sum of two matrices of the same shape."""
    _same_shape(a, b, "Addition")
    return [[x + y for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]


def subtract(a: Matrix, b: Matrix) -> list[list[int]]:
    """Element-wise difference a - b of two matrices of the same shape."""
    _same_shape(a, b, "Subtraction")
    return [[x - y for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]


def multiply(a: Matrix, b: Matrix) -> list[list[int]]:
    """Matrix product a x b."""
    _, a_cols = _shape(a)
    b_rows, _ = _shape(b)
    if a_cols != b_rows:
        raise MatrixShapeError("Product not possible: inner dimensions differ")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


def total(a: Matrix) -> int:
    """Sum of every element of the matrix."""
    return sum(sum(row) for row in a)