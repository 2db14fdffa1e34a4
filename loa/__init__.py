"""Lines of Action rules engine and alpha-beta AI."""

from . import core, env, evaluation, features, players, search
from .core import Board, BoardInvariantError, Move, Piece, Square, sq
from .env import LinesOfActionEnv
from .evaluation import EvaluationResult, GameRecord, evaluate_players, play_game
from .features import BOARD_CHANNELS, build_board_tensor
from .players import MachinePlayer, Player, RandomPlayer
from .search import AlphaBetaSearch, SearchConfig, SearchResult, find_best_move

__all__ = [
    "core",
    "env",
    "evaluation",
    "features",
    "players",
    "search",
    "Board",
    "BoardInvariantError",
    "Move",
    "Piece",
    "Square",
    "sq",
    "LinesOfActionEnv",
    "EvaluationResult",
    "GameRecord",
    "evaluate_players",
    "play_game",
    "BOARD_CHANNELS",
    "build_board_tensor",
    "MachinePlayer",
    "Player",
    "RandomPlayer",
    "AlphaBetaSearch",
    "SearchConfig",
    "SearchResult",
    "find_best_move",
]
