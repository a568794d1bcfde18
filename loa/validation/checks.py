from __future__ import annotations

from typing import List, Set, Tuple

import numpy as np

from loa.core import BOARD_SIZE, Board, construct_move


class EngineConsistencyError(ValueError):
    pass


def perft(board: Board, depth: int) -> int:
    """Number of move sequences of exactly DEPTH plies; BOARD is left unchanged.

    Sequences stop early at positions where the side to move has no legal move.
    """
    if depth <= 0:
        return 1
    moves = board.enumerate_legal_moves()
    if depth == 1:
        return len(moves)
    total = 0
    for move in moves:
        board.apply(move)
        try:
            total += perft(board, depth - 1)
        finally:
            board.unmake()
    return total


def check_round_trip(board: Board, depth: int) -> int:
    """Apply and unmake every move sequence up to DEPTH, verifying each restore.

    Returns the number of moves applied.
    """
    if depth <= 0:
        return 0
    applied = 0
    for move in board.enumerate_legal_moves():
        grid = board.grid.copy()
        turn = board.turn
        made = board.moves_made
        board.apply(move)
        applied += 1
        try:
            if board.moves_made != made + 1 or board.turn != turn.opposite():
                raise EngineConsistencyError(f"apply {move} did not advance the position")
            applied += check_round_trip(board, depth - 1)
        finally:
            board.unmake()
        if not np.array_equal(board.grid, grid):
            raise EngineConsistencyError(f"unmake {move} did not restore the grid")
        if board.turn != turn or board.moves_made != made:
            raise EngineConsistencyError(f"unmake {move} did not restore turn or move count")
    return applied


def _brute_force_moves(board: Board) -> Set[Tuple[int, int, int, int]]:
    found = set()
    squares = [(c, r) for c in range(1, BOARD_SIZE + 1) for r in range(1, BOARD_SIZE + 1)]
    for col0, row0 in squares:
        for col1, row1 in squares:
            move = construct_move(col0, row0, col1, row1, board)
            if board.is_legal(move):
                found.add(move.as_tuple())
    return found


def check_enumeration(board: Board) -> List[str]:
    """Compare enumerated moves with a brute force over all square pairs.

    Raises EngineConsistencyError on any difference, otherwise returns the
    enumerated moves in text form.
    """
    enumerated = board.enumerate_legal_moves()
    if not all(board.is_legal(move) for move in enumerated):
        raise EngineConsistencyError("enumeration produced an illegal move")
    listed = [move.as_tuple() for move in enumerated]
    if len(set(listed)) != len(listed):
        raise EngineConsistencyError("enumeration produced a duplicate move")
    expected = _brute_force_moves(board)
    if set(listed) != expected:
        missing = sorted(expected - set(listed))
        extra = sorted(set(listed) - expected)
        raise EngineConsistencyError(f"enumeration mismatch: missing={missing} extra={extra}")
    return [str(move) for move in enumerated]
