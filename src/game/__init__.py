"""Game pieces and the rotation transform applied to them."""

from src.game.rotation import (
    rotate_clockwise,
    rotate_counterclockwise,
    rotate,
    rotation_states,
)
from src.game.pieces import PIECE_TYPES, get_piece
from src.game.display import format_matrix, format_states

__all__ = [
    "rotate_clockwise",
    "rotate_counterclockwise",
    "rotate",
    "rotation_states",
    "PIECE_TYPES",
    "get_piece",
    "format_matrix",
    "format_states",
]
