from __future__ import annotations

from typing import Tuple

import numpy as np

from loa.core import BOARD_SIZE, Board, Piece

BOARD_CHANNELS = 3  # black, white, side-to-move plane
AUX_VECTOR_SIZE = 2  # side-to-move one-hot


def build_board_tensor(board: Board) -> np.ndarray:
    """Return board tensor with shape (3, 8, 8) channel-first, indexed [channel, row - 1, col - 1]."""
    tensor = np.zeros((BOARD_CHANNELS, BOARD_SIZE, BOARD_SIZE), dtype=np.float32)
    grid = board.grid
    tensor[0] = grid == int(Piece.BLACK)
    tensor[1] = grid == int(Piece.WHITE)
    if board.turn == Piece.BLACK:
        tensor[2] = 1.0
    return tensor


def build_aux_vector(board: Board) -> np.ndarray:
    aux = np.zeros((AUX_VECTOR_SIZE,), dtype=np.float32)
    aux[int(board.turn) - 1] = 1.0
    return aux


def state_to_numpy(board: Board) -> Tuple[np.ndarray, np.ndarray]:
    return build_board_tensor(board), build_aux_vector(board)
