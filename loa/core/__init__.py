"""Core game logic for Lines of Action."""

from .geometry import (
    ALL_SQUARES,
    BOARD_SIZE,
    DIRECTIONS,
    NUM_DIRECTIONS,
    Square,
    is_square_designator,
    opposite_direction,
    sq,
)
from .state import Move, Piece
from .board import (
    DEFAULT_MOVE_LIMIT,
    INITIAL_PIECES,
    WIN_VALUE,
    Board,
    BoardInvariantError,
)

__all__ = [
    "ALL_SQUARES",
    "BOARD_SIZE",
    "DIRECTIONS",
    "NUM_DIRECTIONS",
    "Square",
    "is_square_designator",
    "opposite_direction",
    "sq",
    "Move",
    "Piece",
    "DEFAULT_MOVE_LIMIT",
    "INITIAL_PIECES",
    "WIN_VALUE",
    "Board",
    "BoardInvariantError",
]
