from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, AbstractSet, List, Set

import numpy as np

from .state import ContractViolation, Piece, Square

if TYPE_CHECKING:
    from .board import Board

_NEIGHBOUR_STEPS = tuple(
    (dc, dr) for dc in (-1, 0, 1) for dr in (-1, 0, 1) if (dc, dr) != (0, 0)
)


def occupied_squares(board: "Board", colour: Piece) -> List[Square]:
    """Squares holding COLOUR, column-major."""
    positions = np.argwhere(board.grid.T == int(colour))
    return [(int(c) + 1, int(r) + 1) for c, r in positions]


def _reachable(start: Square, squares: AbstractSet[Square]) -> Set[Square]:
    """Squares of SQUARES king-connected to START, by breadth-first search."""
    visited = {start}
    frontier = deque([start])
    while frontier:
        col, row = frontier.popleft()
        for dc, dr in _NEIGHBOUR_STEPS:
            neighbour = (col + dc, row + dr)
            if neighbour in squares and neighbour not in visited:
                visited.add(neighbour)
                frontier.append(neighbour)
    return visited


def _check_colour(colour: Piece) -> None:
    if colour not in (Piece.BLACK, Piece.WHITE):
        raise ContractViolation(f"Contiguity is defined for BLACK and WHITE, not {colour!r}.")


def is_side_contiguous(board: "Board", colour: Piece) -> bool:
    _check_colour(colour)
    squares = occupied_squares(board, colour)
    if len(squares) <= 1:
        return True
    pending = set(squares)
    return len(_reachable(squares[0], pending)) == len(pending)


def connected_groups(board: "Board", colour: Piece) -> List[List[Square]]:
    """King-connected groups of COLOUR, ordered by the scan position of their first square."""
    _check_colour(colour)
    squares = occupied_squares(board, colour)
    all_squares = set(squares)
    seen: Set[Square] = set()
    groups: List[List[Square]] = []
    for square in squares:
        if square in seen:
            continue
        group = _reachable(square, all_squares)
        seen.update(group)
        groups.append([sq for sq in squares if sq in group])
    return groups


def is_terminal(board: "Board") -> bool:
    return is_side_contiguous(board, Piece.BLACK) or is_side_contiguous(board, Piece.WHITE)
