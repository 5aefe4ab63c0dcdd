"""
Entry point for the piece rotation tool.

Prints tetromino shapes after a number of clockwise quarter turns, or all
four rotation states side by side.

Usage:
    python main.py --piece T
    python main.py --piece L --turns -1
    python main.py --piece all --states
    python main.py --config config/pieces.yaml --piece I --turns 2
"""

from __future__ import annotations

import argparse
import pathlib
import sys

import yaml

from src.game.display import format_matrix, format_states
from src.game.pieces import PIECE_TYPES, get_piece
from src.game.rotation import rotate, rotation_states

DEFAULT_CONFIG: dict = {
    "default_piece": "T",
    "filled_char": "#",
    "empty_char": ".",
    "gap": 2,
}


def load_config(config_path: str | pathlib.Path) -> dict:
    """Load configuration from a YAML file.

    Missing keys fall back to DEFAULT_CONFIG.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Dict of configuration key-value pairs.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If the file does not hold a YAML mapping.
    """
    config_path = pathlib.Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    with open(config_path, "r") as f:
        loaded = yaml.safe_load(f) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")
    return {**DEFAULT_CONFIG, **loaded}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Namespace with config, piece, turns and states attributes.
    """
    parser = argparse.ArgumentParser(
        description="Rotate Tetris pieces and print the result.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        type=str,
        default="config/pieces.yaml",
        help="Path to the YAML configuration file.",
    )
    parser.add_argument(
        "--piece",
        type=str,
        default=None,
        help="Piece name (I, O, T, S, Z, J, L) or 'all' (default: from config).",
    )
    parser.add_argument(
        "--turns",
        type=int,
        default=0,
        help="Clockwise quarter turns to apply; negative turns rotate counter-clockwise.",
    )
    parser.add_argument(
        "--states",
        action="store_true",
        help="Print all four rotation states side by side instead of a single shape.",
    )
    return parser.parse_args(argv)


def render_piece(piece: dict, config: dict, turns: int = 0, states: bool = False) -> str:
    """Format one piece for output, headed by its name."""
    filled = str(config["filled_char"])
    empty = str(config["empty_char"])
    spawn = piece["rotations"][0]
    if states:
        body = format_states(rotation_states(spawn), filled, empty, int(config["gap"]))
    else:
        body = format_matrix(rotate(spawn, turns), filled, empty)
    return f"{piece['name']}:\n{body}"


def main(argv: list[str] | None = None) -> None:
    """Main entry point: parse args, load config, and print the requested pieces."""
    args = parse_args(argv)
    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    name = args.piece or str(config["default_piece"])
    if name.lower() == "all":
        pieces = PIECE_TYPES
    else:
        try:
            pieces = [get_piece(name)]
        except KeyError:
            print(f"Error: unknown piece '{name}'.", file=sys.stderr)
            sys.exit(1)

    print("\n\n".join(render_piece(p, config, args.turns, args.states) for p in pieces))


if __name__ == "__main__":
    main()
