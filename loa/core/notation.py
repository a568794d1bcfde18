from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

from .state import BOARD_SIZE, DIRECTIONS, Direction, FormatError, Move, Square

if TYPE_CHECKING:
    from .board import Board

SQUARE_PATTERN = re.compile(r"^[a-h][1-8]$")
MOVE_PATTERN = re.compile(r"^([a-h][1-8])\s*-?\s*([a-h][1-8])$")

MAX_DISTANCE = BOARD_SIZE - 1
MOVE_VECTOR_SIZE = BOARD_SIZE * BOARD_SIZE * len(DIRECTIONS) * MAX_DISTANCE


def in_bounds(col: int, row: int) -> bool:
    return 1 <= col <= BOARD_SIZE and 1 <= row <= BOARD_SIZE


def col_of(text: str) -> int:
    """Column number (1 for file 'a') of the square designator TEXT."""
    if not isinstance(text, str) or not SQUARE_PATTERN.match(text):
        raise FormatError(f"Bad square designator: {text!r}.")
    return ord(text[0]) - ord("a") + 1


def row_of(text: str) -> int:
    """Row number (1 for rank '1') of the square designator TEXT."""
    if not isinstance(text, str) or not SQUARE_PATTERN.match(text):
        raise FormatError(f"Bad square designator: {text!r}.")
    return int(text[1])


def to_square(text: str) -> Square:
    return col_of(text), row_of(text)


def to_text(col: int, row: int) -> str:
    if not in_bounds(col, row):
        raise FormatError(f"Square ({col}, {row}) is off the board.")
    return f"{chr(ord('a') + col - 1)}{row}"


def construct_move(col0: int, row0: int, col1: int, row1: int, board: "Board") -> Optional[Move]:
    """Move from (col0, row0) to (col1, row1), or None if the squares share no line.

    The moved and replaced pieces are read from BOARD now; legality is not checked.
    """
    if not (in_bounds(col0, row0) and in_bounds(col1, row1)):
        return None
    direction = Direction.from_delta(col1 - col0, row1 - row0)
    if direction is None:
        return None
    length = max(abs(col1 - col0), abs(row1 - row0))
    return Move(
        col0,
        row0,
        col1,
        row1,
        direction,
        length,
        moved=board.get(col0, row0),
        replaced=board.get(col1, row1),
    )


def move_along(col: int, row: int, direction: Direction, length: int, board: "Board") -> Optional[Move]:
    if length <= 0:
        return None
    return construct_move(col, row, col + direction.dc * length, row + direction.dr * length, board)


def parse_move(text: str, board: "Board") -> Optional[Move]:
    """Move described by TEXT such as 'b1-b3', or None if TEXT is not a move."""
    if not isinstance(text, str):
        return None
    match = MOVE_PATTERN.match(text.strip().lower())
    if match is None:
        return None
    col0, row0 = to_square(match.group(1))
    col1, row1 = to_square(match.group(2))
    return construct_move(col0, row0, col1, row1, board)


@dataclass(frozen=True)
class MoveVector:
    origin: Tuple[int, int]
    direction_index: int
    distance: int

    @property
    def direction(self) -> Direction:
        return DIRECTIONS[self.direction_index]

    def destination(self) -> Tuple[int, int]:
        direction = self.direction
        return (
            self.origin[0] + direction.dc * self.distance,
            self.origin[1] + direction.dr * self.distance,
        )

    def to_move(self, board: "Board") -> Optional[Move]:
        col1, row1 = self.destination()
        return construct_move(self.origin[0], self.origin[1], col1, row1, board)

    @staticmethod
    def from_move(move: Move) -> "MoveVector":
        if not 1 <= move.length <= MAX_DISTANCE:
            raise ValueError("Move distance out of range.")
        return MoveVector(move.origin, DIRECTIONS.index(move.direction), move.length)

    def to_index(self) -> int:
        base = (self.origin[0] - 1) * BOARD_SIZE + (self.origin[1] - 1)
        base = base * len(DIRECTIONS) + self.direction_index
        return base * MAX_DISTANCE + (self.distance - 1)

    @staticmethod
    def from_index(index: int) -> "MoveVector":
        if not 0 <= index < MOVE_VECTOR_SIZE:
            raise ValueError("Move index out of range.")
        distance = (index % MAX_DISTANCE) + 1
        index //= MAX_DISTANCE
        direction_index = index % len(DIRECTIONS)
        index //= len(DIRECTIONS)
        col = index // BOARD_SIZE + 1
        row = index % BOARD_SIZE + 1
        return MoveVector((col, row), direction_index, distance)


def encode_move(move: Move) -> int:
    return MoveVector.from_move(move).to_index()


def decode_move(index: int, board: "Board") -> Optional[Move]:
    return MoveVector.from_index(index).to_move(board)
