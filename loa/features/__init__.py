"""Feature extraction helpers for Lines of Action agents."""

from .observation import BOARD_CHANNELS, build_board_tensor

__all__ = ["BOARD_CHANNELS", "build_board_tensor"]
