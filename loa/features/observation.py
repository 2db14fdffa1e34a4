from __future__ import annotations

import numpy as np

from loa.core import BOARD_SIZE, Board, Piece

BOARD_CHANNELS = 3  # black pieces, white pieces, side-to-move plane


def build_board_tensor(board: Board) -> np.ndarray:
    """Return board tensor with shape (3, 8, 8) channel-first, row 0 at the bottom."""
    tensor = np.zeros((BOARD_CHANNELS, BOARD_SIZE, BOARD_SIZE), dtype=np.float32)
    tensor[0] = board.cells == Piece.BLACK
    tensor[1] = board.cells == Piece.WHITE
    if board.turn == Piece.WHITE:
        tensor[2] = 1.0
    return tensor
