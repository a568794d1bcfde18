"""Lines of Action engine."""

from . import core, env, features, game, validation
from .core import Board, ContractViolation, Direction, FormatError, Move, Piece
from .env import LinesOfActionEnv
from .features import (
    AUX_VECTOR_SIZE,
    BOARD_CHANNELS,
    Transform,
    all_transforms,
    build_aux_vector,
    build_board_tensor,
    state_to_numpy,
    transform_board,
)
from .game import GameConfig, GameResult, GameSession, TieBreak, decide_result
from .validation import EngineConsistencyError, check_enumeration, check_round_trip, perft

__all__ = [
    "core",
    "env",
    "features",
    "game",
    "validation",
    "Board",
    "ContractViolation",
    "Direction",
    "FormatError",
    "Move",
    "Piece",
    "LinesOfActionEnv",
    "AUX_VECTOR_SIZE",
    "BOARD_CHANNELS",
    "Transform",
    "all_transforms",
    "build_aux_vector",
    "build_board_tensor",
    "state_to_numpy",
    "transform_board",
    "GameConfig",
    "GameResult",
    "GameSession",
    "TieBreak",
    "decide_result",
    "EngineConsistencyError",
    "check_enumeration",
    "check_round_trip",
    "perft",
]
