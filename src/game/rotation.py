"""
Quarter-turn rotation of square piece matrices.

A matrix is either a nested sequence of rows (lists or tuples) or a 2-D
numpy array. Cells are never inspected, only moved, so any payload works
(0/1 masks, piece IDs, bools, enums).

Coordinate convention matches pieces.py: row 0 is the top, column 0 is the
left edge. For an N x N matrix M, the clockwise rotation R satisfies

    R[i][j] = M[N-1-j][i]

i.e. row i of the result is column i of the input read bottom to top.
"""

from __future__ import annotations

from typing import Any, Sequence, Union

import numpy as np

Matrix = Union[Sequence[Sequence[Any]], np.ndarray]


def _square_size(matrix: Matrix) -> int:
    """Return N for an N x N matrix, raising ValueError for any other shape."""
    if isinstance(matrix, np.ndarray):
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            raise ValueError(f"Expected a square matrix, got array of shape {matrix.shape}")
        return matrix.shape[0]

    n = len(matrix)
    for r, row in enumerate(matrix):
        if len(row) != n:
            raise ValueError(
                f"Expected a square matrix, row {r} has length {len(row)} (expected {n})"
            )
    return n


def _copy(matrix: Matrix) -> Matrix:
    if isinstance(matrix, np.ndarray):
        return matrix.copy()
    return [list(row) for row in matrix]


def rotate_clockwise(matrix: Matrix) -> Matrix:
    """Rotate a square matrix 90 degrees clockwise.

    The input is left untouched; the result is freshly allocated and shares
    no rows with it.

    Args:
        matrix: N x N nested sequence or 2-D numpy array (N may be 0).

    Returns:
        The rotated matrix. A list of lists for sequence input, a new numpy
        array of the same dtype for array input.

    Raises:
        ValueError: If the matrix is not square (including jagged rows).
    """
    n = _square_size(matrix)
    if isinstance(matrix, np.ndarray):
        return np.rot90(matrix, k=-1).copy()
    return [[matrix[n - 1 - j][i] for j in range(n)] for i in range(n)]


def rotate_counterclockwise(matrix: Matrix) -> Matrix:
    """Rotate a square matrix 90 degrees counter-clockwise.

    Inverse of rotate_clockwise: R[i][j] = M[j][N-1-i].

    Raises:
        ValueError: If the matrix is not square.
    """
    n = _square_size(matrix)
    if isinstance(matrix, np.ndarray):
        return np.rot90(matrix, k=1).copy()
    return [[matrix[j][n - 1 - i] for j in range(n)] for i in range(n)]


def rotate(matrix: Matrix, turns: int) -> Matrix:
    """Apply a number of quarter turns to a square matrix.

    Args:
        matrix: N x N nested sequence or 2-D numpy array.
        turns: Quarter turns; positive is clockwise, negative is
            counter-clockwise. Taken modulo 4.

    Returns:
        A new rotated matrix. For a multiple of 4 turns this is a copy of
        the input, never the input object itself.
    """
    _square_size(matrix)
    turns %= 4
    if turns == 0:
        return _copy(matrix)
    if turns == 3:
        return rotate_counterclockwise(matrix)
    result = matrix
    for _ in range(turns):
        result = rotate_clockwise(result)
    return result


def rotation_states(matrix: Matrix) -> list:
    """Return all four rotation states of a matrix.

    Order follows the guideline numbering: [0=spawn, 1=CW (R), 2=180, 3=CCW (L)].
    State 0 is a copy of the input.
    """
    _square_size(matrix)
    states = [_copy(matrix)]
    for _ in range(3):
        states.append(rotate_clockwise(states[-1]))
    return states
