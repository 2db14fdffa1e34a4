"""Game driver and match statistics."""

from .match import EvaluationResult, GameRecord, describe_winner, evaluate_players, play_game

__all__ = ["EvaluationResult", "GameRecord", "describe_winner", "evaluate_players", "play_game"]
