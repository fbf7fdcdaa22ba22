# Area: Engine
"""
rps_engine._engine.snapshot — Session snapshot builder
======================================================

Builds read-only SessionSnapshot copies of the mutable session state.
"""

from ..types import Score, SessionSnapshot
from .state import SessionState


def build_snapshot(state: SessionState) -> SessionSnapshot:
    """Build an immutable snapshot of the current session state."""
    return SessionSnapshot(
        turn_state=state.turn_state,
        player_move=state.player_move,
        opponent_move=state.opponent_move,
        outcome=state.outcome,
        score=Score(player=state.player_score, opponent=state.opponent_score),
        busy=state.busy,
        epoch=state.epoch,
        game_started=state.game_started,
    )
