# Area: Shared
"""
rps_engine.errors — Custom exception classes
=============================================

Defines the exception hierarchy raised by the game engine.
Each exception stores the context needed for structured logging.
"""

from __future__ import annotations
from typing import Any, Dict, Iterable, Tuple


class RPSEngineError(Exception):
    """Base exception for all rps_engine errors."""

    def to_log_fields(self) -> Dict[str, Any]:
        return {"error_type": self.__class__.__name__}


class InvalidMoveError(RPSEngineError):
    """Raised when a move is not one of the catalog's legal moves."""

    def __init__(self, move: Any, valid_moves: Iterable[str]):
        self.move = move
        self.valid_moves: Tuple[str, ...] = tuple(valid_moves)
        super().__init__(
            f"Invalid move: {move!r}. Valid moves: {', '.join(self.valid_moves)}"
        )

    def to_log_fields(self) -> Dict[str, Any]:
        return {
            "error_type": "INVALID_MOVE",
            "move": repr(self.move),
            "valid_moves": list(self.valid_moves),
        }


class SessionBusyError(RPSEngineError):
    """Raised on submission while a resolution is pending (strict mode only)."""

    def __init__(self, turn_state: str):
        self.turn_state = turn_state
        super().__init__(
            f"Session is busy ({turn_state}); wait for the current turn to resolve"
        )

    def to_log_fields(self) -> Dict[str, Any]:
        return {
            "error_type": "SESSION_BUSY",
            "turn_state": self.turn_state,
        }
