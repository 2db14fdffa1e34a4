"""Gymnasium environment for Lines of Action."""

from .gym_env import ACTION_VECTOR_SIZE, LinesOfActionEnv, decode_action, encode_move

__all__ = ["ACTION_VECTOR_SIZE", "LinesOfActionEnv", "decode_action", "encode_move"]
