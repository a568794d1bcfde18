from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from functools import lru_cache
from typing import Callable, Dict, Iterable, Tuple

import numpy as np

from loa.core import (
    BOARD_SIZE,
    DIRECTIONS,
    MOVE_VECTOR_SIZE,
    Board,
    Direction,
    MoveVector,
)

_EDGE = BOARD_SIZE + 1


class Transform(Enum):
    IDENTITY = auto()
    ROT90 = auto()
    ROT180 = auto()
    ROT270 = auto()
    FLIP_H = auto()
    FLIP_V = auto()
    FLIP_MAIN_DIAG = auto()
    FLIP_ANTI_DIAG = auto()


@dataclass(frozen=True)
class Symmetry:
    name: str
    transform: Transform
    position_fn: Callable[[int, int], Tuple[int, int]]


# Square maps on 1-based (col, row). They are affine, so they also act on
# off-board points and on direction steps.
def _identity(c: int, r: int) -> Tuple[int, int]:
    return c, r


def _rot90(c: int, r: int) -> Tuple[int, int]:
    return r, _EDGE - c


def _rot180(c: int, r: int) -> Tuple[int, int]:
    return _EDGE - c, _EDGE - r


def _rot270(c: int, r: int) -> Tuple[int, int]:
    return _EDGE - r, c


def _flip_h(c: int, r: int) -> Tuple[int, int]:
    return _EDGE - c, r


def _flip_v(c: int, r: int) -> Tuple[int, int]:
    return c, _EDGE - r


def _flip_main_diag(c: int, r: int) -> Tuple[int, int]:
    return r, c


def _flip_anti_diag(c: int, r: int) -> Tuple[int, int]:
    return _EDGE - r, _EDGE - c


_SYMMETRIES: Dict[Transform, Symmetry] = {
    Transform.IDENTITY: Symmetry("identity", Transform.IDENTITY, _identity),
    Transform.ROT90: Symmetry("rot90", Transform.ROT90, _rot90),
    Transform.ROT180: Symmetry("rot180", Transform.ROT180, _rot180),
    Transform.ROT270: Symmetry("rot270", Transform.ROT270, _rot270),
    Transform.FLIP_H: Symmetry("flip_h", Transform.FLIP_H, _flip_h),
    Transform.FLIP_V: Symmetry("flip_v", Transform.FLIP_V, _flip_v),
    Transform.FLIP_MAIN_DIAG: Symmetry("flip_main_diag", Transform.FLIP_MAIN_DIAG, _flip_main_diag),
    Transform.FLIP_ANTI_DIAG: Symmetry("flip_anti_diag", Transform.FLIP_ANTI_DIAG, _flip_anti_diag),
}


def get_symmetry(transform: Transform) -> Symmetry:
    return _SYMMETRIES[transform]


def all_transforms() -> Iterable[Transform]:
    return list(_SYMMETRIES.keys())


def transform_square(transform: Transform, col: int, row: int) -> Tuple[int, int]:
    return get_symmetry(transform).position_fn(col, row)


def transform_direction(transform: Transform, direction: Direction) -> Direction:
    fn = get_symmetry(transform).position_fn
    c1, r1 = fn(direction.dc, direction.dr)
    c0, r0 = fn(0, 0)
    return Direction((c1 - c0, r1 - r0))


def transform_move_vector(transform: Transform, vector: MoveVector) -> MoveVector:
    origin = transform_square(transform, *vector.origin)
    direction = transform_direction(transform, vector.direction)
    return MoveVector(origin, DIRECTIONS.index(direction), vector.distance)


def transform_board(board: Board, transform: Transform) -> Board:
    """A new board holding BOARD's pieces moved by TRANSFORM, same side to move, no history."""
    contents = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
    for (row_index, col_index), value in np.ndenumerate(board.grid):
        if value == 0:
            continue
        col, row = transform_square(transform, col_index + 1, row_index + 1)
        contents[row - 1, col - 1] = value
    return Board(contents, board.turn)


def transform_board_tensor(tensor: np.ndarray, transform: Transform) -> np.ndarray:
    result = np.zeros_like(tensor)
    channels, rows, cols = tensor.shape
    for channel in range(channels):
        for row_index in range(rows):
            for col_index in range(cols):
                col, row = transform_square(transform, col_index + 1, row_index + 1)
                result[channel, row - 1, col - 1] = tensor[channel, row_index, col_index]
    return result


@lru_cache(maxsize=None)
def _policy_permutation_cached(transform: Transform) -> np.ndarray:
    perm = np.zeros(MOVE_VECTOR_SIZE, dtype=np.int32)
    for idx in range(MOVE_VECTOR_SIZE):
        vector = MoveVector.from_index(idx)
        new_idx = transform_move_vector(transform, vector).to_index()
        perm[new_idx] = idx
    return perm


def policy_permutation(transform: Transform) -> np.ndarray:
    """Return permutation array P such that new_policy = old_policy[P]."""
    return _policy_permutation_cached(transform)


def apply_policy_transform(policy: np.ndarray, transform: Transform) -> np.ndarray:
    perm = policy_permutation(transform)
    return policy[perm]
