"""Core game logic for Lines of Action."""

from .state import (
    BOARD_SIZE,
    DIRECTIONS,
    ContractViolation,
    Direction,
    FormatError,
    Move,
    Piece,
    Square,
)
from .notation import (
    MOVE_VECTOR_SIZE,
    MoveVector,
    col_of,
    construct_move,
    decode_move,
    encode_move,
    in_bounds,
    move_along,
    parse_move,
    row_of,
    to_square,
    to_text,
)
from .rules import (
    FIRST_MOVER,
    INITIAL_PIECES,
    blocked,
    enumerate_legal_moves,
    has_any_legal_move,
    is_legal,
    legal_moves,
    line_count,
    piece_count_along,
)
from .connectivity import connected_groups, is_side_contiguous, is_terminal, occupied_squares
from .board import Board

__all__ = [
    "BOARD_SIZE",
    "DIRECTIONS",
    "FIRST_MOVER",
    "INITIAL_PIECES",
    "MOVE_VECTOR_SIZE",
    "Board",
    "ContractViolation",
    "Direction",
    "FormatError",
    "Move",
    "MoveVector",
    "Piece",
    "Square",
    "blocked",
    "col_of",
    "connected_groups",
    "construct_move",
    "decode_move",
    "encode_move",
    "enumerate_legal_moves",
    "has_any_legal_move",
    "in_bounds",
    "is_legal",
    "is_side_contiguous",
    "is_terminal",
    "legal_moves",
    "line_count",
    "move_along",
    "occupied_squares",
    "parse_move",
    "piece_count_along",
    "row_of",
    "to_square",
    "to_text",
]
