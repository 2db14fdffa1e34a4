from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

import numpy as np

from loa.core import Board, Move, Piece
from loa.players import Player

logger = logging.getLogger(__name__)


@dataclass
class GameRecord:
    winner: Optional[Piece]
    moves: List[Move] = field(default_factory=list)

    @property
    def length(self) -> int:
        return len(self.moves)


@dataclass
class EvaluationResult:
    games_played: int
    black_wins: int
    white_wins: int
    draws: int
    average_length: float

    def winrate_black(self) -> float:
        return self.black_wins / max(1, self.games_played)

    def winrate_white(self) -> float:
        return self.white_wins / max(1, self.games_played)


def play_game(
    black: Player,
    white: Player,
    *,
    board: Optional[Board] = None,
    move_limit: Optional[int] = None,
) -> GameRecord:
    """Alternate BLACK and WHITE on BOARD (a fresh board by default) until
    the game ends. A side with no move ends the game undecided."""
    board = board if board is not None else Board()
    if move_limit is not None:
        board.set_move_limit(move_limit)

    played: List[Move] = []
    while not board.game_over():
        player = black if board.turn == Piece.BLACK else white
        move = player.choose_move(board)
        if move is None:
            logger.warning("%s has no legal move after %d moves", board.turn.full_name, board.moves_made())
            break
        board.make_move(move)
        played.append(board.moves[-1])

    return GameRecord(winner=board.winner(), moves=played)


def evaluate_players(
    black: Player,
    white: Player,
    *,
    episodes: int,
    move_limit: Optional[int] = None,
    seed: Optional[int] = None,
    board_factory: Optional[Callable[[], Board]] = None,
) -> EvaluationResult:
    board_factory = board_factory or Board
    rng = np.random.default_rng(seed)

    black_wins = 0
    white_wins = 0
    draws = 0
    total_moves = 0

    for episode in range(episodes):
        seeds = rng.integers(0, 2**31 - 1, size=2)
        record = play_game(
            black.spawn(int(seeds[0])),
            white.spawn(int(seeds[1])),
            board=board_factory(),
            move_limit=move_limit,
        )
        total_moves += record.length
        if record.winner == Piece.BLACK:
            black_wins += 1
        elif record.winner == Piece.WHITE:
            white_wins += 1
        else:
            draws += 1
        logger.info("game %d: winner=%s moves=%d", episode + 1, describe_winner(record.winner), record.length)

    return EvaluationResult(
        games_played=episodes,
        black_wins=black_wins,
        white_wins=white_wins,
        draws=draws,
        average_length=total_moves / max(1, episodes),
    )


def describe_winner(winner: Optional[Piece]) -> str:
    if winner is None:
        return "undecided"
    if winner == Piece.EMPTY:
        return "tie"
    return winner.full_name
