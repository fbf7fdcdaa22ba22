# Area: Engine
"""
rps_engine._engine.state_machine — Turn State Machine
=====================================================

Tracks the lifecycle of a single turn and validates transitions.
"""

from __future__ import annotations

import logging

from .enums import TurnState, TurnEvent

logger = logging.getLogger("rps_engine.state_machine")


# Valid state transitions: {current_state: {event: next_state}}
TRANSITIONS = {
    TurnState.IDLE: {
        TurnEvent.SUBMIT: TurnState.AWAITING_RESOLUTION,
        TurnEvent.RESET: TurnState.IDLE,
    },
    TurnState.AWAITING_RESOLUTION: {
        TurnEvent.RESOLVE: TurnState.RESOLVED,
        TurnEvent.ABANDON: TurnState.IDLE,
        TurnEvent.RESET: TurnState.IDLE,
    },
    TurnState.RESOLVED: {
        TurnEvent.SUBMIT: TurnState.AWAITING_RESOLUTION,
        TurnEvent.RESET: TurnState.IDLE,
    },
}


class TurnStateMachine:
    """
    State machine for the turn lifecycle.

    Attributes:
        current_state: The current state of the state machine
    """

    def __init__(self):
        """Initialize state machine in IDLE."""
        self.current_state = TurnState.IDLE

    def can_transition(self, event: TurnEvent) -> bool:
        """
        Check if a transition is valid from current state.

        Args:
            event: The event to check

        Returns:
            True if the transition is valid, False otherwise
        """
        return event in TRANSITIONS.get(self.current_state, {})

    def transition(self, event: TurnEvent) -> TurnState:
        """
        Execute a state transition.

        Args:
            event: The event triggering the transition

        Returns:
            The new state after transition

        Raises:
            ValueError: If the transition is not valid from the current state
        """
        if not self.can_transition(event):
            raise ValueError(
                f"Invalid transition: {event.value} from {self.current_state.value}"
            )
        previous = self.current_state
        self.current_state = TRANSITIONS[previous][event]
        logger.debug("Turn: %s → %s (%s)", previous.value, self.current_state.value, event.value)
        return self.current_state

    def reset(self) -> None:
        """Reset state machine to IDLE."""
        self.transition(TurnEvent.RESET)
