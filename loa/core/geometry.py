from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

BOARD_SIZE = 8
NUM_DIRECTIONS = 8

# (dcol, drow) per direction: E, NE, N, NW, W, SW, S, SE
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
    (0, -1),
    (1, -1),
)

SQUARE_DESIGNATOR = re.compile(r"^[a-h][1-8]$")
COLUMN_NAMES = "abcdefgh"


def opposite_direction(direction: int) -> int:
    return (direction + NUM_DIRECTIONS // 2) % NUM_DIRECTIONS


def is_square_designator(text: str) -> bool:
    return SQUARE_DESIGNATOR.fullmatch(text) is not None


@dataclass(frozen=True)
class Square:
    """One cell of the board. Row 0 is the bottom row ("1")."""

    col: int
    row: int

    @property
    def index(self) -> int:
        return self.row * BOARD_SIZE + self.col

    def direction(self, other: "Square") -> int:
        """Direction index from this square toward OTHER, or -1 if OTHER is
        not on a row, column or diagonal through this square."""
        dc = other.col - self.col
        dr = other.row - self.row
        if (dc == 0 and dr == 0) or (dc != 0 and dr != 0 and abs(dc) != abs(dr)):
            return -1
        return DIRECTIONS.index((_sign(dc), _sign(dr)))

    def distance(self, other: "Square") -> int:
        return max(abs(other.col - self.col), abs(other.row - self.row))

    def is_valid_move(self, other: "Square") -> bool:
        return self.direction(other) != -1

    def move_dest(self, direction: int, steps: int) -> Optional["Square"]:
        if not 0 <= direction < NUM_DIRECTIONS:
            raise ValueError(f"Invalid direction: {direction}")
        dc, dr = DIRECTIONS[direction]
        col = self.col + dc * steps
        row = self.row + dr * steps
        if not _in_bounds(col, row):
            return None
        return _SQUARES[row * BOARD_SIZE + col]

    def adjacent(self) -> Tuple["Square", ...]:
        return _ADJACENT[self.index]

    @staticmethod
    def parse(text: str) -> "Square":
        if not is_square_designator(text):
            raise ValueError(f"Invalid square designator: {text!r}")
        return sq(COLUMN_NAMES.index(text[0]), int(text[1]) - 1)

    def __str__(self) -> str:
        return f"{COLUMN_NAMES[self.col]}{self.row + 1}"

    def __repr__(self) -> str:
        return f"Square({self})"


def sq(col: Union[int, str], row: Optional[int] = None) -> Square:
    """Return the shared Square at (COL, ROW), or parse a designator such as
    ``sq("c4")``."""
    if isinstance(col, str):
        return Square.parse(col)
    if row is None or not _in_bounds(col, row):
        raise ValueError(f"Square out of range: ({col}, {row})")
    return _SQUARES[row * BOARD_SIZE + col]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _in_bounds(col: int, row: int) -> bool:
    return 0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE


_SQUARES: Tuple[Square, ...] = tuple(
    Square(index % BOARD_SIZE, index // BOARD_SIZE) for index in range(BOARD_SIZE * BOARD_SIZE)
)

ALL_SQUARES = _SQUARES

_ADJACENT: Tuple[Tuple[Square, ...], ...] = tuple(
    tuple(
        _SQUARES[(square.row + dr) * BOARD_SIZE + square.col + dc]
        for dc, dr in DIRECTIONS
        if _in_bounds(square.col + dc, square.row + dr)
    )
    for square in _SQUARES
)
