from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, List, Optional, Sequence

import numpy as np

from .notation import in_bounds, move_along
from .state import BOARD_SIZE, DIRECTIONS, Direction, Move, Piece

if TYPE_CHECKING:
    from .board import Board

_E, _B, _W = Piece.EMPTY, Piece.BLACK, Piece.WHITE

# Row 1 first: INITIAL_PIECES[row - 1][col - 1].
INITIAL_PIECES: Sequence[Sequence[Piece]] = (
    (_E, _B, _B, _B, _B, _B, _B, _E),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_W, _E, _E, _E, _E, _E, _E, _W),
    (_E, _B, _B, _B, _B, _B, _B, _E),
)
FIRST_MOVER = Piece.BLACK


def line_count(board: "Board", col: int, row: int, direction: Direction) -> int:
    """Number of pieces on the whole line of action through (col, row) along DIRECTION.

    Both halves of the line are counted, so opposite directions agree.
    """
    grid = board.grid
    c, r = col - 1, row - 1
    if direction in (Direction.E, Direction.W):
        line = grid[r, :]
    elif direction in (Direction.N, Direction.S):
        line = grid[:, c]
    elif direction in (Direction.NE, Direction.SW):
        line = np.diagonal(grid, offset=c - r)
    else:
        line = np.diagonal(np.fliplr(grid), offset=(BOARD_SIZE - 1 - c) - r)
    return int(np.count_nonzero(line))


def piece_count_along(board: "Board", move: Move) -> int:
    return line_count(board, move.col0, move.row0, move.direction)


def blocked(board: "Board", move: Move) -> bool:
    """True iff MOVE lands on its own colour or passes over an opposing piece."""
    grid = board.grid
    mover = int(move.moved)
    if grid[move.row1 - 1, move.col1 - 1] == mover:
        return True
    c, r = move.col0 - 1, move.row0 - 1
    for _ in range(move.length - 1):
        c += move.direction.dc
        r += move.direction.dr
        occupant = grid[r, c]
        if occupant != 0 and occupant != mover:
            return True
    return False


def is_legal(board: "Board", move: Optional[Move]) -> bool:
    if move is None:
        return False
    if not (in_bounds(move.col0, move.row0) and in_bounds(move.col1, move.row1)):
        return False
    if Direction.from_delta(move.col1 - move.col0, move.row1 - move.row0) != move.direction:
        return False
    if move.length != max(abs(move.col1 - move.col0), abs(move.row1 - move.row0)):
        return False
    start = board.get(move.col0, move.row0)
    if start != board.turn:
        return False
    # Descriptor built against a different position.
    if start != move.moved or board.get(move.col1, move.row1) != move.replaced:
        return False
    if move.length != piece_count_along(board, move):
        return False
    return not blocked(board, move)


def legal_moves(board: "Board") -> Iterator[Move]:
    """Yield the legal moves of the side to move.

    Squares are scanned column-major (a1, a2, ..., a8, b1, ..., h8) and the
    directions of each square in ``Direction`` order. The board must not be
    mutated while the generator is being consumed.
    """
    side = int(board.turn)
    grid = board.grid
    for col in range(1, BOARD_SIZE + 1):
        for row in range(1, BOARD_SIZE + 1):
            if grid[row - 1, col - 1] != side:
                continue
            for direction in DIRECTIONS:
                length = line_count(board, col, row, direction)
                move = move_along(col, row, direction, length, board)
                if is_legal(board, move):
                    yield move


def enumerate_legal_moves(board: "Board") -> List[Move]:
    return list(legal_moves(board))


def has_any_legal_move(board: "Board") -> bool:
    return next(legal_moves(board), None) is not None
