"""Mutable Lines of Action position with an undo history."""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

from . import connectivity, rules
from .notation import in_bounds, to_square
from .state import BOARD_SIZE, ContractViolation, Direction, Move, Piece

logger = logging.getLogger(__name__)

Contents = Union[Sequence[Sequence[Piece]], np.ndarray]


class Board:
    """An 8x8 grid, the side to move and the list of moves made so far.

    Boards compare by identity. Use ``copy`` to hand an independent board to
    another owner.
    """

    def __init__(self, contents: Optional[Contents] = None, turn: Piece = rules.FIRST_MOVER) -> None:
        self._grid = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        self._moves: List[Move] = []
        self._turn = rules.FIRST_MOVER
        if contents is None:
            self.reset()
        else:
            self.initialize(contents, turn)

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------
    def initialize(self, contents: Contents, turn: Piece) -> None:
        """Set the grid to CONTENTS, where contents[row - 1][col - 1] is (col, row)."""
        array = np.asarray(contents, dtype=np.int8)
        if array.shape != (BOARD_SIZE, BOARD_SIZE):
            raise ContractViolation(f"Board contents must be {BOARD_SIZE}x{BOARD_SIZE}, got {array.shape}.")
        if not np.isin(array, [int(piece) for piece in Piece]).all():
            raise ContractViolation("Board contents hold an unknown piece value.")
        self._check_side(turn)
        self._moves.clear()
        self._grid[:, :] = array
        self._turn = Piece(turn)

    def reset(self) -> None:
        self.initialize(rules.INITIAL_PIECES, rules.FIRST_MOVER)

    clear = reset

    def copy(self) -> "Board":
        other = Board.__new__(Board)
        other._grid = self._grid.copy()
        other._moves = list(self._moves)
        other._turn = self._turn
        return other

    def copy_from(self, board: "Board") -> None:
        if board is self:
            return
        self._grid[:, :] = board._grid
        self._moves = list(board._moves)
        self._turn = board._turn

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------
    @property
    def grid(self) -> np.ndarray:
        """Read-only view indexed as grid[row - 1, col - 1]."""
        view = self._grid.view()
        view.flags.writeable = False
        return view

    @property
    def turn(self) -> Piece:
        return self._turn

    @property
    def moves_made(self) -> int:
        return len(self._moves)

    @property
    def history(self) -> Tuple[Move, ...]:
        return tuple(self._moves)

    def get(self, col: Union[int, str], row: Optional[int] = None) -> Piece:
        """Piece at column COL, row ROW, or at the square named by COL (e.g. 'd5')."""
        if isinstance(col, str):
            if row is not None:
                raise ContractViolation("A square name takes no separate row.")
            col, row = to_square(col)
        if row is None or not in_bounds(col, row):
            raise ContractViolation(f"Square ({col}, {row}) is off the board.")
        return Piece(int(self._grid[row - 1, col - 1]))

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def set(self, col: int, row: int, piece: Piece, next_turn: Optional[Piece] = None) -> None:
        """Put PIECE on (col, row); make NEXT_TURN the side to move if given."""
        if not in_bounds(col, row):
            raise ContractViolation(f"Square ({col}, {row}) is off the board.")
        if next_turn is not None:
            self._check_side(next_turn)
        self._grid[row - 1, col - 1] = int(Piece(piece))
        if next_turn is not None:
            self._turn = Piece(next_turn)

    def apply(self, move: Move) -> None:
        """Make MOVE, which must be legal for the side to move."""
        if not self.is_legal(move):
            raise ContractViolation(f"Illegal move {move} for {self._turn.full_name}.")
        self._grid[move.row1 - 1, move.col1 - 1] = int(move.moved)
        self._grid[move.row0 - 1, move.col0 - 1] = int(Piece.EMPTY)
        self._moves.append(move)
        self._turn = self._turn.opposite()
        logger.debug("apply %s (capture=%s), %d moves made", move, move.is_capture, len(self._moves))

    def unmake(self) -> Move:
        """Retract the last move and return it."""
        if not self._moves:
            raise ContractViolation("No move to retract.")
        move = self._moves.pop()
        self._grid[move.row1 - 1, move.col1 - 1] = int(move.replaced)
        self._grid[move.row0 - 1, move.col0 - 1] = int(move.moved)
        self._turn = self._turn.opposite()
        logger.debug("unmake %s, %d moves made", move, len(self._moves))
        return move

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------
    def line_count(self, col: int, row: int, direction: Direction) -> int:
        return rules.line_count(self, col, row, direction)

    def is_legal(self, move: Optional[Move]) -> bool:
        return rules.is_legal(self, move)

    def blocked(self, move: Move) -> bool:
        return rules.blocked(self, move)

    def legal_moves(self) -> Iterator[Move]:
        return rules.legal_moves(self)

    def enumerate_legal_moves(self) -> List[Move]:
        return rules.enumerate_legal_moves(self)

    def has_any_legal_move(self) -> bool:
        return rules.has_any_legal_move(self)

    def is_side_contiguous(self, colour: Piece) -> bool:
        return connectivity.is_side_contiguous(self, colour)

    def is_terminal(self) -> bool:
        return connectivity.is_terminal(self)

    def __iter__(self) -> Iterator[Move]:
        return self.legal_moves()

    @staticmethod
    def _check_side(side: Piece) -> None:
        if side not in (Piece.BLACK, Piece.WHITE):
            raise ContractViolation(f"Side to move must be BLACK or WHITE, not {side!r}.")

    def __repr__(self) -> str:
        rows = []
        for row in range(BOARD_SIZE, 0, -1):
            rows.append(" ".join(self.get(col, row).abbrev for col in range(1, BOARD_SIZE + 1)))
        return f"Board(turn={self._turn.full_name}, moves={len(self._moves)})\n" + "\n".join(rows)
