"""
rps_engine — Rock-Paper-Scissors Game Engine
============================================

Copyright (c) 2026 RPS Engine Maintainers. Released under the MIT License.

A two-party rock-paper-scissors engine: the move-resolution rule, a
turn state machine with a delayed, cancellable resolution, a randomized
opponent with an injectable entropy source and a session score ledger.

Quick Start:
    from rps_engine import GameSession, ROCK

    session = GameSession()
    session.submit_move(ROCK)
    print(session.wait_for_resolution().status_message)

Deterministic play (tests, replays):
    from rps_engine import GameSession, ManualScheduler, ScriptedOpponent

    scheduler = ManualScheduler()
    session = GameSession(opponent=ScriptedOpponent(["scissors"]), scheduler=scheduler)
    session.submit_move("rock")
    scheduler.advance(1.5)
    session.current_state().score    # Score(player=1, opponent=0)

Terminal play:
    python -m rps_engine
"""

from .catalog import (
    Move,
    Outcome,
    MoveCatalog,
    DEFAULT_CATALOG,
    ROCK,
    PAPER,
    SCISSORS,
)
from .opponents import OpponentStrategy, RandomOpponent, ScriptedOpponent
from .session import GameSession
from .types import Score, SessionSnapshot
from .errors import (
    RPSEngineError,
    InvalidMoveError,
    SessionBusyError,
)
from ._engine import (
    TurnState,
    Scheduler,
    ScheduledTask,
    ThreadingScheduler,
    AsyncioScheduler,
    ManualScheduler,
)
from ._config import load_config, validate_config
from ._shared import setup_logging

__all__ = [
    # Catalog
    "Move",
    "Outcome",
    "MoveCatalog",
    "DEFAULT_CATALOG",
    "ROCK",
    "PAPER",
    "SCISSORS",
    # Opponents
    "OpponentStrategy",
    "RandomOpponent",
    "ScriptedOpponent",
    # Session
    "GameSession",
    "Score",
    "SessionSnapshot",
    "TurnState",
    # Scheduling
    "Scheduler",
    "ScheduledTask",
    "ThreadingScheduler",
    "AsyncioScheduler",
    "ManualScheduler",
    # Errors
    "RPSEngineError",
    "InvalidMoveError",
    "SessionBusyError",
    # Setup
    "load_config",
    "validate_config",
    "setup_logging",
]
__version__ = "1.0.0"
