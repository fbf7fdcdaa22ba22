# Area: Engine
"""
Engine internals used by GameSession.

This package contains:
- The turn state machine and its enums
- The mutable session state record
- Resolution schedulers (threading, asyncio, manual clock)
- The snapshot builder
"""

from .enums import TurnState, TurnEvent
from .state_machine import TurnStateMachine, TRANSITIONS
from .state import SessionState
from .scheduler import (
    Scheduler,
    ScheduledTask,
    ThreadingScheduler,
    AsyncioScheduler,
    ManualScheduler,
)

__all__ = [
    "TurnState",
    "TurnEvent",
    "TurnStateMachine",
    "TRANSITIONS",
    "SessionState",
    "Scheduler",
    "ScheduledTask",
    "ThreadingScheduler",
    "AsyncioScheduler",
    "ManualScheduler",
]
