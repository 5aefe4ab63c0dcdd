"""
Tetromino definitions with all 4 rotation states.

Only the spawn shape of each piece is written out. The remaining states are
derived by rotating the spawn shape clockwise inside its bounding box, which
reproduces the Super Rotation System (SRS) states of the Tetris Guideline
exactly. Rotation order: [0=spawn, 1=CW (R), 2=180 (2), 3=CCW (L)].

Coordinate convention:
  - Each state is a square numpy int8 array, 1 marks a filled cell.
  - Row 0 is the top and row increases downward.
  - Column 0 is the left edge and column increases rightward.
"""

from __future__ import annotations

import numpy as np

from src.game.rotation import rotation_states


def _make_piece(piece_id: int, name: str, spawn: list[list[int]]) -> dict:
    """Build a piece dict from its spawn shape."""
    return {
        "id": piece_id,
        "name": name,
        "rotations": rotation_states(np.array(spawn, dtype=np.int8)),
    }


# =============================================================================
# Tetromino Definitions (spawn states)
# =============================================================================

I_PIECE: dict = _make_piece(1, "I", [
    [0, 0, 0, 0],
    [1, 1, 1, 1],
    [0, 0, 0, 0],
    [0, 0, 0, 0],
])

O_PIECE: dict = _make_piece(2, "O", [
    [1, 1],
    [1, 1],
])

T_PIECE: dict = _make_piece(3, "T", [
    [0, 1, 0],
    [1, 1, 1],
    [0, 0, 0],
])

S_PIECE: dict = _make_piece(4, "S", [
    [0, 1, 1],
    [1, 1, 0],
    [0, 0, 0],
])

Z_PIECE: dict = _make_piece(5, "Z", [
    [1, 1, 0],
    [0, 1, 1],
    [0, 0, 0],
])

J_PIECE: dict = _make_piece(6, "J", [
    [1, 0, 0],
    [1, 1, 1],
    [0, 0, 0],
])

L_PIECE: dict = _make_piece(7, "L", [
    [0, 0, 1],
    [1, 1, 1],
    [0, 0, 0],
])

# =============================================================================
# Ordered list of all piece types
# =============================================================================

PIECE_TYPES: list[dict] = [I_PIECE, O_PIECE, T_PIECE, S_PIECE, Z_PIECE, J_PIECE, L_PIECE]


def get_piece(name: str) -> dict:
    """Look up a piece by name (case-insensitive).

    Args:
        name: Piece letter, e.g. "T" or "t".

    Returns:
        The piece dict.

    Raises:
        KeyError: If no piece has that name.
    """
    for piece in PIECE_TYPES:
        if piece["name"] == name.upper():
            return piece
    raise KeyError(f"Unknown piece: {name!r}")
