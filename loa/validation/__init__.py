"""Self-checks for the move generator and the undo history."""

from .checks import EngineConsistencyError, check_enumeration, check_round_trip, perft

__all__ = ["EngineConsistencyError", "check_enumeration", "check_round_trip", "perft"]
