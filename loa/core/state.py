from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple

BOARD_SIZE = 8


class FormatError(ValueError):
    """Malformed square, move or piece text."""


class ContractViolation(AssertionError):
    """A caller broke a precondition of the engine."""


class Piece(IntEnum):
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    def opposite(self) -> "Piece":
        if self is Piece.EMPTY:
            raise ContractViolation("EMPTY has no opposite.")
        return Piece.WHITE if self is Piece.BLACK else Piece.BLACK

    @property
    def abbrev(self) -> str:
        return _ABBREVIATIONS[self]

    @property
    def full_name(self) -> str:
        return self.name.lower()

    @staticmethod
    def from_text(text: str) -> "Piece":
        key = text.strip().lower()
        for piece in Piece:
            if key in (piece.abbrev, piece.full_name):
                return piece
        if key == "e":
            return Piece.EMPTY
        raise FormatError(f"Unknown piece designator: {text!r}.")


_ABBREVIATIONS = {Piece.EMPTY: "-", Piece.BLACK: "b", Piece.WHITE: "w"}


class Direction(Enum):
    N = (0, 1)
    NE = (1, 1)
    E = (1, 0)
    SE = (1, -1)
    S = (0, -1)
    SW = (-1, -1)
    W = (-1, 0)
    NW = (-1, 1)

    @property
    def dc(self) -> int:
        return self.value[0]

    @property
    def dr(self) -> int:
        return self.value[1]

    def opposite(self) -> "Direction":
        return Direction((-self.dc, -self.dr))

    @staticmethod
    def from_delta(dc: int, dr: int) -> Optional["Direction"]:
        """Direction pointing from one square to another, if they share a line."""
        if dc == 0 and dr == 0:
            return None
        if dc != 0 and dr != 0 and abs(dc) != abs(dr):
            return None
        step = ((dc > 0) - (dc < 0), (dr > 0) - (dr < 0))
        return Direction(step)


DIRECTIONS: Tuple[Direction, ...] = tuple(Direction)


@dataclass(frozen=True)
class Move:
    col0: int
    row0: int
    col1: int
    row1: int
    direction: Direction
    length: int
    moved: Piece
    replaced: Piece = Piece.EMPTY

    @property
    def origin(self) -> Tuple[int, int]:
        return (self.col0, self.row0)

    @property
    def destination(self) -> Tuple[int, int]:
        return (self.col1, self.row1)

    @property
    def is_capture(self) -> bool:
        return self.replaced not in (Piece.EMPTY, self.moved)

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.col0, self.row0, self.col1, self.row1)

    def __str__(self) -> str:
        return (
            f"{chr(ord('a') + self.col0 - 1)}{self.row0}"
            f"-{chr(ord('a') + self.col1 - 1)}{self.row1}"
        )


# (col, row), both in 1..BOARD_SIZE
Square = Tuple[int, int]
