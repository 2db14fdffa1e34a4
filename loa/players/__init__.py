"""Move-choosing players."""

from .policies import MachinePlayer, Player, RandomPlayer

__all__ = ["Player", "RandomPlayer", "MachinePlayer"]
