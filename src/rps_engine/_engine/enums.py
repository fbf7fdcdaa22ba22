# Area: Engine
"""
rps_engine._engine.enums — Turn State Machine Enums
===================================================

Defines the states and events for the turn state machine.
"""

from enum import Enum


class TurnState(Enum):
    """
    States of a game session's current turn.

    State transitions:
    IDLE -> AWAITING_RESOLUTION (on SUBMIT)
    AWAITING_RESOLUTION -> RESOLVED (on RESOLVE, after the delay)
    RESOLVED -> AWAITING_RESOLUTION (on SUBMIT)
    AWAITING_RESOLUTION -> IDLE (on ABANDON, if the opponent cannot move)
    Any state -> IDLE (on RESET)
    """
    IDLE = "IDLE"
    AWAITING_RESOLUTION = "AWAITING_RESOLUTION"
    RESOLVED = "RESOLVED"


class TurnEvent(Enum):
    """
    Events that trigger turn state transitions.

    Events are triggered by:
    - SUBMIT: the player commits a move
    - RESOLVE: the scheduled resolution fires
    - ABANDON: the opponent failed to produce a move
    - RESET: the score is reset (after the caller's confirmation)
    """
    SUBMIT = "SUBMIT"
    RESOLVE = "RESOLVE"
    ABANDON = "ABANDON"
    RESET = "RESET"
