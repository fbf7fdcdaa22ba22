# Area: Engine
"""
rps_engine._engine.state — Session state record
===============================================

The single record a GameSession owns: turn state, the two moves, the
outcome, the cumulative score, the busy flag and the reset epoch.
Turn-state and score changes happen together inside one method call,
so a reader holding the session lock never sees one without the other.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..catalog import Move, Outcome
from .enums import TurnEvent, TurnState
from .state_machine import TurnStateMachine

logger = logging.getLogger("rps_engine.state")


@dataclass
class SessionState:
    """
    Full mutable state of one game session.

    The session maintains this internally. Callers only ever see
    SessionSnapshot copies of it.
    """
    session_id: str
    machine: TurnStateMachine = field(default_factory=TurnStateMachine)
    player_move: Optional[Move] = None       # valid in AWAITING_RESOLUTION / RESOLVED
    opponent_move: Optional[Move] = None     # valid in RESOLVED only
    outcome: Optional[Outcome] = None        # valid in RESOLVED only
    player_score: int = 0
    opponent_score: int = 0
    busy: bool = False
    epoch: int = 0
    game_started: bool = False

    @property
    def turn_state(self) -> TurnState:
        return self.machine.current_state

    # ── Transition helpers ───────────────────────────────────

    def begin_turn(self, player_move: Move) -> None:
        """Commit the player's move and enter AWAITING_RESOLUTION."""
        self._advance(TurnEvent.SUBMIT)
        self.player_move = player_move
        self.opponent_move = None
        self.outcome = None
        self.busy = True
        self.game_started = True

    def complete_turn(self, opponent_move: Move, outcome: Outcome) -> None:
        """Apply a resolution: record the opponent move and score it."""
        self._advance(TurnEvent.RESOLVE)
        self.opponent_move = opponent_move
        self.outcome = outcome
        if outcome is Outcome.WINS:
            self.player_score += 1
        elif outcome is Outcome.LOSES:
            self.opponent_score += 1
        self.busy = False

    def abandon_turn(self) -> None:
        """Drop the pending turn without scoring it; the score is kept."""
        self._advance(TurnEvent.ABANDON)
        self.player_move = None
        self.busy = False

    def reset(self) -> None:
        """Zero the score, clear both moves and return to IDLE."""
        logger.info(f"[{self.session_id}] Resetting session (epoch {self.epoch} → {self.epoch + 1})")
        self.machine.reset()
        self.player_move = None
        self.opponent_move = None
        self.outcome = None
        self.player_score = 0
        self.opponent_score = 0
        self.busy = False
        self.game_started = False
        self.epoch += 1

    def _advance(self, event: TurnEvent) -> None:
        previous = self.turn_state
        self.machine.transition(event)
        logger.info(f"[{self.session_id}] Turn: {previous.value} → {self.turn_state.value}")
