from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import IntEnum

from .geometry import Square


class Piece(IntEnum):
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    def opposite(self) -> "Piece":
        if self == Piece.BLACK:
            return Piece.WHITE
        if self == Piece.WHITE:
            return Piece.BLACK
        raise ValueError("EMPTY has no opposite.")

    @property
    def abbrev(self) -> str:
        return _ABBREVIATIONS[self]

    @property
    def full_name(self) -> str:
        return self.name.capitalize()


_ABBREVIATIONS = {Piece.EMPTY: "-", Piece.BLACK: "b", Piece.WHITE: "w"}

_MOVE_TEXT = re.compile(r"^([a-h][1-8])-([a-h][1-8])$")


@dataclass(frozen=True)
class Move:
    from_sq: Square
    to_sq: Square
    is_capture: bool = False

    def capture_move(self) -> "Move":
        return replace(self, is_capture=True)

    @staticmethod
    def parse(text: str) -> "Move":
        match = _MOVE_TEXT.fullmatch(text)
        if match is None:
            raise ValueError(f"Invalid move: {text!r}")
        return Move(Square.parse(match.group(1)), Square.parse(match.group(2)))

    def __str__(self) -> str:
        return f"{self.from_sq}-{self.to_sq}"
