"""Game-tree search."""

from .alphabeta import INFINITY, AlphaBetaSearch, SearchConfig, SearchResult, find_best_move

__all__ = ["INFINITY", "AlphaBetaSearch", "SearchConfig", "SearchResult", "find_best_move"]
