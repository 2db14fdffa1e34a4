from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from loa.core import Board, Move, Piece

logger = logging.getLogger(__name__)

INFINITY = 2**31 - 1


@dataclass
class SearchConfig:
    depth: int = 4
    # Leaf scores get a random bonus in [0, tiebreak_range) to vary play
    # among equally valued moves; 0 disables it.
    tiebreak_range: int = 50


@dataclass
class SearchResult:
    move: Optional[Move]
    value: int
    nodes: int


class AlphaBetaSearch:
    """Fixed-depth minimax with alpha-beta pruning over copied boards.

    Leaves are scored with ``Board.heuristic`` for the side to move at the
    root, so the root maximizes (sense +1) and the replies minimize (sense
    -1). Among moves whose score equals the current bound, the last one
    enumerated is kept.
    """

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        *,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config or SearchConfig()
        self.rng = rng or np.random.default_rng()
        self._side = Piece.BLACK
        self._found_move: Optional[Move] = None
        self._nodes = 0

    def search(self, board: Board, depth: Optional[int] = None) -> SearchResult:
        depth = self.config.depth if depth is None else depth
        if depth < 1:
            raise ValueError("Search depth must be at least 1.")
        work = board.copy()
        self._side = work.turn
        self._found_move = None
        self._nodes = 0
        if work.game_over():
            return SearchResult(move=None, value=work.heuristic(self._side), nodes=0)

        value = self._find_move(work, depth, True, 1, -INFINITY, INFINITY)
        logger.debug(
            "searched %d nodes at depth %d for %s: move=%s value=%d",
            self._nodes,
            depth,
            self._side.full_name,
            self._found_move,
            value,
        )
        return SearchResult(move=self._found_move, value=value, nodes=self._nodes)

    # ------------------------------------------------------------------
    def _find_move(
        self,
        board: Board,
        depth: int,
        save_move: bool,
        sense: int,
        alpha: int,
        beta: int,
    ) -> int:
        self._nodes += 1
        if depth == 0 or board.game_over():
            return board.heuristic(self._side, self._tiebreak())

        best = 0
        for move in board.legal_moves():
            child = board.copy()
            child.make_move(move)
            score = self._find_move(child, depth - 1, False, -sense, alpha, beta)
            if sense == 1:
                alpha = max(alpha, score)
                if score == alpha:
                    best = score
                    if save_move:
                        self._found_move = move
                if alpha > beta:
                    if save_move:
                        self._found_move = move
                    return alpha
            else:
                beta = min(beta, score)
                if score == beta:
                    best = score
                    if save_move:
                        self._found_move = move
                if alpha > beta:
                    if save_move:
                        self._found_move = move
                    return beta
        return best

    def _tiebreak(self) -> int:
        if self.config.tiebreak_range <= 0:
            return 0
        return int(self.rng.integers(0, self.config.tiebreak_range))


def find_best_move(
    board: Board,
    depth: int = 4,
    *,
    rng: Optional[np.random.Generator] = None,
) -> Optional[Move]:
    """Recommended move for the side to move, or None if the game is over."""
    return AlphaBetaSearch(SearchConfig(depth=depth), rng=rng).search(board).move
