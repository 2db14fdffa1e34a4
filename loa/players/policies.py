from __future__ import annotations

from copy import deepcopy
from typing import Optional

import numpy as np

from loa.core import Board, Move
from loa.search import AlphaBetaSearch, SearchConfig


class Player:
    """Chooses a move for the side to move on a board."""

    def choose_move(self, board: Board) -> Optional[Move]:
        raise NotImplementedError

    def spawn(self, seed: Optional[int] = None) -> "Player":
        """Return an independent copy of this player."""
        return self


class RandomPlayer(Player):
    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def choose_move(self, board: Board) -> Optional[Move]:
        legal = board.legal_moves()
        if not legal or board.game_over():
            return None
        return legal[int(self.rng.integers(0, len(legal)))]

    def spawn(self, seed: Optional[int] = None) -> "RandomPlayer":
        return RandomPlayer(np.random.default_rng(seed))


class MachinePlayer(Player):
    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        *,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self._config = deepcopy(config) if config else SearchConfig()
        self.searcher = AlphaBetaSearch(self._config, rng=rng or np.random.default_rng())

    def choose_move(self, board: Board) -> Optional[Move]:
        return self.searcher.search(board).move

    def spawn(self, seed: Optional[int] = None) -> "MachinePlayer":
        return MachinePlayer(self._config, rng=np.random.default_rng(seed))
