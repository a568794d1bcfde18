from __future__ import annotations

from enum import Enum
from typing import Optional

from loa.core import Board, Piece


class GameResult(Enum):
    ONGOING = "ongoing"
    BLACK_WIN = "black_win"
    WHITE_WIN = "white_win"
    DRAW = "draw"


class TieBreak(Enum):
    """Who wins when both sides are contiguous at once."""

    MOVER = "mover"  # the side that just moved
    SIDE_TO_MOVE = "side_to_move"
    DRAW = "draw"


def _win_for(side: Piece) -> GameResult:
    return GameResult.BLACK_WIN if side == Piece.BLACK else GameResult.WHITE_WIN


def decide_result(board: Board, tie_break: TieBreak = TieBreak.MOVER) -> GameResult:
    black = board.is_side_contiguous(Piece.BLACK)
    white = board.is_side_contiguous(Piece.WHITE)
    if black and white:
        if tie_break == TieBreak.DRAW:
            return GameResult.DRAW
        if tie_break == TieBreak.SIDE_TO_MOVE:
            return _win_for(board.turn)
        return _win_for(board.turn.opposite())
    if black:
        return GameResult.BLACK_WIN
    if white:
        return GameResult.WHITE_WIN
    if not board.has_any_legal_move():
        return GameResult.DRAW
    return GameResult.ONGOING


def winner_of(result: GameResult) -> Optional[Piece]:
    if result == GameResult.BLACK_WIN:
        return Piece.BLACK
    if result == GameResult.WHITE_WIN:
        return Piece.WHITE
    return None
