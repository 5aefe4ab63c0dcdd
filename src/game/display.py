"""Plain-text formatting of piece matrices for terminal output."""

from __future__ import annotations

from typing import Sequence

from src.game.rotation import Matrix


def format_matrix(matrix: Matrix, filled: str = "#", empty: str = ".") -> str:
    """Format a matrix as text, one line per row.

    Any non-zero cell is drawn with `filled`, zero cells with `empty`.

    Args:
        matrix: Nested sequence or 2-D numpy array.
        filled: Character for occupied cells.
        empty: Character for empty cells.

    Returns:
        The formatted grid (empty string for an empty matrix).
    """
    return "\n".join(
        "".join(filled if cell else empty for cell in row) for row in matrix
    )


def format_states(
    states: Sequence[Matrix], filled: str = "#", empty: str = ".", gap: int = 2
) -> str:
    """Format several matrices side by side, separated by `gap` spaces.

    Shorter matrices are padded with blank lines at the bottom.
    """
    blocks = [format_matrix(m, filled, empty).split("\n") if len(m) else [] for m in states]
    height = max((len(b) for b in blocks), default=0)
    widths = [max((len(line) for line in b), default=0) for b in blocks]
    lines = []
    for r in range(height):
        parts = [
            (b[r] if r < len(b) else "").ljust(w) for b, w in zip(blocks, widths)
        ]
        lines.append((" " * gap).join(parts).rstrip())
    return "\n".join(lines)
