from __future__ import annotations

from typing import Dict, List, Optional, Sequence

import numpy as np
from numpy.typing import NDArray

from .geometry import ALL_SQUARES, BOARD_SIZE, NUM_DIRECTIONS, Square, opposite_direction, sq
from .state import Move, Piece

BoardArray = NDArray[np.int8]

# Moves per side before the game is declared a tie.
DEFAULT_MOVE_LIMIT = 60
WIN_VALUE = 1000 << 10

_E = Piece.EMPTY
_B = Piece.BLACK
_W = Piece.WHITE

# Bottom row first: INITIAL_PIECES[row][col].
INITIAL_PIECES: Sequence[Sequence[Piece]] = (
    (_E, _B, _B, _B, _B, _B, _B, _E),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_E, _B, _B, _B, _B, _B, _B, _E),
)


class BoardInvariantError(AssertionError):
    """Raised when a move or retraction is requested whose precondition
    does not hold. Callers are expected never to trigger it."""


class Board:
    """Mutable Lines of Action position: piece grid, move history, side to
    move and tie limit.

    ``cells[row, col]`` holds the ``Piece`` value of each square; row 0 is the
    bottom row. Region sizes are computed on demand and cached until the next
    mutation.
    """

    def __init__(
        self,
        contents: Optional[Sequence[Sequence[Piece]]] = None,
        turn: Piece = Piece.BLACK,
    ) -> None:
        self.cells: BoardArray = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        self.moves: List[Move] = []
        self._turn = Piece.BLACK
        self._move_limit = 2 * DEFAULT_MOVE_LIMIT
        self._region_sizes: Optional[Dict[Piece, List[int]]] = None
        self.initialize(INITIAL_PIECES if contents is None else contents, turn)

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------
    def initialize(self, contents: Sequence[Sequence[Piece]], side: Piece) -> None:
        grid = np.asarray(contents, dtype=np.int8)
        if grid.shape != (BOARD_SIZE, BOARD_SIZE):
            raise ValueError(f"Board contents must be {BOARD_SIZE}x{BOARD_SIZE}, got {grid.shape}.")
        self.cells[:, :] = grid
        self.moves.clear()
        self._turn = Piece(side)
        self._move_limit = 2 * DEFAULT_MOVE_LIMIT
        self._region_sizes = None

    def clear(self) -> None:
        self.initialize(INITIAL_PIECES, Piece.BLACK)

    def copy(self) -> "Board":
        board = Board.__new__(Board)
        board.cells = self.cells.copy()
        board.moves = list(self.moves)
        board._turn = self._turn
        board._move_limit = self._move_limit
        board._region_sizes = None
        return board

    def copy_from(self, other: "Board") -> None:
        if other is self:
            return
        self.cells[:, :] = other.cells
        self.moves = list(other.moves)
        self._turn = other._turn
        self._move_limit = other._move_limit
        self._region_sizes = None

    def get(self, square: Square) -> Piece:
        return Piece(int(self.cells[square.row, square.col]))

    def set(self, square: Square, piece: Piece, next_turn: Optional[Piece] = None) -> None:
        self.cells[square.row, square.col] = int(piece)
        if next_turn is not None:
            self._turn = next_turn
        self._region_sizes = None

    def set_move_limit(self, limit: int) -> None:
        """Declare a tie once each side has made LIMIT moves."""
        if 2 * limit <= self.moves_made():
            raise ValueError("move limit too small")
        self._move_limit = 2 * limit

    @property
    def move_limit(self) -> int:
        return self._move_limit // 2

    @property
    def turn(self) -> Piece:
        return self._turn

    def moves_made(self) -> int:
        return len(self.moves)

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------
    def make_move(self, move: Move) -> None:
        if not self.is_legal_move(move):
            raise BoardInvariantError(f"Illegal move {move} for {self._turn.full_name}.")
        mover = self.get(move.from_sq)
        captured = self.get(move.to_sq)
        self.cells[move.from_sq.row, move.from_sq.col] = int(Piece.EMPTY)
        self.cells[move.to_sq.row, move.to_sq.col] = int(mover)
        move = move.capture_move() if captured == mover.opposite() else Move(move.from_sq, move.to_sq)
        self.moves.append(move)
        self._turn = self._turn.opposite()
        self._region_sizes = None

    def retract(self) -> None:
        if not self.moves:
            raise BoardInvariantError("No moves to retract.")
        move = self.moves.pop()
        mover = self.get(move.to_sq)
        restored = mover.opposite() if move.is_capture else Piece.EMPTY
        self.cells[move.to_sq.row, move.to_sq.col] = int(restored)
        self.cells[move.from_sq.row, move.from_sq.col] = int(mover)
        self._turn = self._turn.opposite()
        self._region_sizes = None

    def is_legal(self, from_sq: Square, to_sq: Square) -> bool:
        if self.get(from_sq) != self._turn:
            return False
        direction = from_sq.direction(to_sq)
        if direction == -1:
            return False
        return from_sq.distance(to_sq) == self.count(from_sq, direction) and not self._blocked(from_sq, to_sq)

    def is_legal_move(self, move: Move) -> bool:
        return self.is_legal(move.from_sq, move.to_sq)

    def count(self, from_sq: Square, direction: int) -> int:
        """Number of pieces on the whole line through FROM_SQ along
        DIRECTION, FROM_SQ included."""
        result = 1
        reverse = opposite_direction(direction)
        for steps in range(1, BOARD_SIZE):
            for square in (from_sq.move_dest(direction, steps), from_sq.move_dest(reverse, steps)):
                if square is not None and self.cells[square.row, square.col] != Piece.EMPTY:
                    result += 1
        return result

    def legal_moves(self) -> List[Move]:
        legal: List[Move] = []
        turn = int(self._turn)
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if self.cells[row, col] != turn:
                    continue
                from_sq = sq(col, row)
                for direction in range(NUM_DIRECTIONS):
                    to_sq = from_sq.move_dest(direction, self.count(from_sq, direction))
                    if to_sq is not None and self.is_legal(from_sq, to_sq):
                        legal.append(Move(from_sq, to_sq))
        return legal

    def _blocked(self, from_sq: Square, to_sq: Square) -> bool:
        mover = self.get(from_sq)
        enemy = int(mover.opposite())
        direction = from_sq.direction(to_sq)
        for steps in range(1, from_sq.distance(to_sq)):
            between = from_sq.move_dest(direction, steps)
            if self.cells[between.row, between.col] == enemy:
                return True
        return self.get(to_sq) == mover

    # ------------------------------------------------------------------
    # Regions and outcome
    # ------------------------------------------------------------------
    def region_sizes(self, side: Piece) -> List[int]:
        if self._region_sizes is None:
            self._region_sizes = self._compute_regions()
        return list(self._region_sizes[side])

    def pieces_contiguous(self, side: Piece) -> bool:
        return len(self.region_sizes(side)) == 1

    def winner(self) -> Optional[Piece]:
        """Winning side, ``Piece.EMPTY`` for a tie, or None while the game
        is in progress. If both sides are contiguous the side that just
        moved wins."""
        mover = self._turn.opposite()
        if (
            self.moves_made() < self._move_limit
            and not self.pieces_contiguous(Piece.BLACK)
            and not self.pieces_contiguous(Piece.WHITE)
        ):
            return None
        if self.pieces_contiguous(mover):
            return mover
        if self.pieces_contiguous(self._turn):
            return self._turn
        return Piece.EMPTY

    def game_over(self) -> bool:
        return self.winner() is not None

    def heuristic(self, side: Piece, tiebreak: int = 0) -> int:
        winner = self.winner()
        if winner is not None:
            if winner == side:
                return WIN_VALUE
            if winner == side.opposite():
                return -WIN_VALUE
        sizes = self.region_sizes(side)
        total = sum(sizes)
        ratio = 0
        for size in sizes:
            ratio = max(ratio, size * 100 // total)
        opponent_regions = len(self.region_sizes(side.opposite()))
        return (ratio + opponent_regions + tiebreak) << 10

    def _compute_regions(self) -> Dict[Piece, List[int]]:
        visited = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=bool)
        sizes: Dict[Piece, List[int]] = {Piece.BLACK: [], Piece.WHITE: []}
        for square in ALL_SQUARES:
            value = self.cells[square.row, square.col]
            if value == Piece.EMPTY or visited[square.row, square.col]:
                continue
            sizes[Piece(int(value))].append(self._flood_fill(square, visited))
        for side_sizes in sizes.values():
            side_sizes.sort(reverse=True)
        return sizes

    def _flood_fill(self, start: Square, visited: np.ndarray) -> int:
        colour = self.cells[start.row, start.col]
        stack = [start]
        visited[start.row, start.col] = True
        size = 0
        while stack:
            square = stack.pop()
            size += 1
            for neighbour in square.adjacent():
                if not visited[neighbour.row, neighbour.col] and self.cells[neighbour.row, neighbour.col] == colour:
                    visited[neighbour.row, neighbour.col] = True
                    stack.append(neighbour)
        return size

    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._turn == other._turn and np.array_equal(self.cells, other.cells)

    def __hash__(self) -> int:
        return hash(self.cells.tobytes()) * 2 + hash(self._turn)

    def __str__(self) -> str:
        lines = ["==="]
        for row in range(BOARD_SIZE - 1, -1, -1):
            lines.append("    " + " ".join(Piece(int(value)).abbrev for value in self.cells[row]))
        lines.append(f"Next move: {self._turn.full_name}")
        lines.append("===")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Board(turn={self._turn.full_name}, moves={self.moves_made()})"
