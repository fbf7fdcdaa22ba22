# Area: Engine
"""
rps_engine.types — Read-only models exposed to the presentation layer
======================================================================

Snapshots are frozen pydantic models: the presentation layer may keep,
compare and serialize them, but cannot change the session through them.

    >>> snapshot = session.current_state()
    >>> snapshot.turn_state, snapshot.score.player, snapshot.score.opponent
    (<TurnState.IDLE: 'IDLE'>, 0, 0)
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, InstanceOf, NonNegativeInt

from .catalog import Move, Outcome
from ._engine.enums import TurnState


STATUS_MESSAGES = {
    Outcome.WINS: "You won!",
    Outcome.LOSES: "You lost!",
    Outcome.TIES: "It's a tie!",
}
PENDING_MESSAGE = "Choosing..."


class Score(BaseModel):
    """Cumulative score of one session."""
    model_config = ConfigDict(frozen=True)

    player: NonNegativeInt = 0
    opponent: NonNegativeInt = 0


class SessionSnapshot(BaseModel):
    """Point-in-time view of a GameSession.

    Fields
    ------
    turn_state : TurnState
        IDLE, AWAITING_RESOLUTION or RESOLVED.
    player_move : Move or None
        Set while awaiting resolution and once resolved.
    opponent_move : Move or None
        Set only once resolved.
    outcome : Outcome or None
        Player's result, set only once resolved.
    score : Score
        Cumulative score.
    busy : bool
        True while a resolution is pending.
    epoch : int
        Number of resets performed on the session.
    game_started : bool
        False on a fresh or freshly reset session.
    """
    model_config = ConfigDict(frozen=True)

    turn_state: TurnState
    player_move: Optional[InstanceOf[Move]] = None
    opponent_move: Optional[InstanceOf[Move]] = None
    outcome: Optional[Outcome] = None
    score: Score = Score()
    busy: bool = False
    epoch: NonNegativeInt = 0
    game_started: bool = False

    @property
    def status_message(self) -> str:
        if self.turn_state is TurnState.AWAITING_RESOLUTION:
            return PENDING_MESSAGE
        if self.turn_state is TurnState.RESOLVED and self.outcome is not None:
            return STATUS_MESSAGES[self.outcome]
        return ""

    def to_log_dict(self) -> Dict[str, Any]:
        """Flat, JSON-friendly representation for logs."""
        return {
            "turn_state": self.turn_state.value,
            "player_move": self.player_move.identifier if self.player_move else None,
            "opponent_move": self.opponent_move.identifier if self.opponent_move else None,
            "outcome": self.outcome.value if self.outcome else None,
            "score": {"player": self.score.player, "opponent": self.score.opponent},
            "epoch": self.epoch,
        }
