from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from loa.core import BOARD_SIZE, NUM_DIRECTIONS, Board, Move, Piece, sq
from loa.features import BOARD_CHANNELS, build_board_tensor

# A move is fully determined by its origin and direction: the distance is
# fixed by the line count.
ACTION_VECTOR_SIZE = BOARD_SIZE * BOARD_SIZE * NUM_DIRECTIONS


def encode_move(move: Move) -> int:
    direction = move.from_sq.direction(move.to_sq)
    if direction == -1:
        raise ValueError(f"Move {move} is not along a line.")
    return move.from_sq.index * NUM_DIRECTIONS + direction


def decode_action(board: Board, index: int) -> Optional[Move]:
    """Move for action INDEX on BOARD, or None if it would leave the board."""
    if not 0 <= index < ACTION_VECTOR_SIZE:
        raise ValueError("Action index out of range.")
    square_index, direction = divmod(index, NUM_DIRECTIONS)
    from_sq = sq(square_index % BOARD_SIZE, square_index // BOARD_SIZE)
    to_sq = from_sq.move_dest(direction, board.count(from_sq, direction))
    if to_sq is None:
        return None
    return Move(from_sq, to_sq)


class LinesOfActionEnv(gym.Env):
    """Two-player environment; both sides act through ``step``.

    The reward is given to the side that just moved: 1.0 for a win, -1.0 for
    a loss, 0.0 otherwise.
    """

    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        *,
        move_limit: Optional[int] = None,
        enforce_legal_actions: bool = True,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._move_limit = move_limit
        self._enforce_legal = enforce_legal_actions
        self.render_mode = render_mode

        board_shape = (BOARD_CHANNELS, BOARD_SIZE, BOARD_SIZE)
        self.observation_space = spaces.Box(low=0.0, high=1.0, shape=board_shape, dtype=np.float32)
        self.action_space = spaces.Discrete(ACTION_VECTOR_SIZE)

        self.board = self._new_board(move_limit)

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        move_limit = options.get("move_limit", self._move_limit) if options else self._move_limit
        self.board = self._new_board(move_limit)
        return build_board_tensor(self.board), self._build_info()

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")
        if self.board.game_over():
            raise ValueError("Game is over; call reset().")

        move = decode_action(self.board, int(action_index))
        if move is None or not self.board.is_legal_move(move):
            if self._enforce_legal:
                raise ValueError("Illegal action provided and enforce_legal_actions=True.")
            return build_board_tensor(self.board), -1.0, False, False, self._build_info()

        mover = self.board.turn
        self.board.make_move(move)

        winner = self.board.winner()
        terminated = winner is not None
        reward = self._compute_reward(winner, mover)
        return build_board_tensor(self.board), reward, terminated, False, self._build_info()

    def legal_action_mask(self) -> np.ndarray:
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        for move in self.board.legal_moves():
            mask[encode_move(move)] = 1
        return mask

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return str(self.board)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _new_board(move_limit: Optional[int]) -> Board:
        board = Board()
        if move_limit is not None:
            board.set_move_limit(move_limit)
        return board

    def _build_info(self) -> Dict[str, object]:
        return {
            "legal_action_mask": self.legal_action_mask(),
            "turn": self.board.turn,
            "moves_made": self.board.moves_made(),
        }

    @staticmethod
    def _compute_reward(winner: Optional[Piece], mover: Piece) -> float:
        if winner == mover:
            return 1.0
        if winner == mover.opposite():
            return -1.0
        return 0.0
