"""Game-level policy and the console session built on the core engine."""

from .outcome import GameResult, TieBreak, decide_result, winner_of
from .config import GameConfig, load_yaml_config
from .session import GameSession, format_board

__all__ = [
    "GameResult",
    "TieBreak",
    "decide_result",
    "winner_of",
    "GameConfig",
    "load_yaml_config",
    "GameSession",
    "format_board",
]
