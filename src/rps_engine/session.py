# Area: Engine
"""
rps_engine.session — The game session
======================================

GameSession is what the presentation layer instantiates. It accepts the
player's move, schedules the resolution after a fixed delay, draws the
opponent's move from an injected strategy, scores the turn and exposes
read-only snapshots.

Usage
-----
    from rps_engine import GameSession, ROCK

    session = GameSession()
    session.submit_move(ROCK)            # returns immediately
    snapshot = session.wait_for_resolution(timeout=5)
    print(snapshot.status_message, snapshot.score)

Every mutation of the session state happens under one re-entrant lock,
so timer threads and the caller's thread never interleave. A reset
bumps the session epoch; a resolution scheduled under an older epoch is
discarded when it fires.

Each state change is numbered. Listeners are notified one snapshot at a
time and never receive a snapshot older than one already delivered, so
a resolution that overtakes the submission notice on another thread
still leaves listeners on the newest state.
"""

from __future__ import annotations

import functools
import logging
import threading
import uuid
from typing import Any, Callable, Dict, List, Optional, Tuple

from .catalog import DEFAULT_CATALOG, Move, MoveCatalog, MoveLike
from .errors import SessionBusyError
from .opponents import OpponentStrategy, RandomOpponent
from .types import SessionSnapshot
from ._config import DEFAULT_RESOLUTION_DELAY_SECONDS, validate_config
from ._engine.enums import TurnState
from ._engine.scheduler import ScheduledTask, Scheduler, ThreadingScheduler
from ._engine.snapshot import build_snapshot
from ._engine.state import SessionState

logger = logging.getLogger("rps_engine.session")

StateListener = Callable[[SessionSnapshot], None]


class GameSession:
    """
    Stateful rock-paper-scissors engine for one player against the computer.

    Parameters
    ----------
    catalog : MoveCatalog, optional
        Legal moves and resolution rule. Defaults to DEFAULT_CATALOG.
    opponent : OpponentStrategy, optional
        Source of opponent moves. Defaults to an unseeded RandomOpponent.
    scheduler : Scheduler, optional
        Runs the delayed resolution. Defaults to ThreadingScheduler.
    resolution_delay : float
        Seconds between submission and resolution.
    strict_busy : bool
        Raise SessionBusyError on submissions while busy instead of
        silently ignoring them.
    """

    def __init__(
        self,
        catalog: Optional[MoveCatalog] = None,
        opponent: Optional[OpponentStrategy] = None,
        scheduler: Optional[Scheduler] = None,
        resolution_delay: float = DEFAULT_RESOLUTION_DELAY_SECONDS,
        strict_busy: bool = False,
        session_id: Optional[str] = None,
    ):
        if resolution_delay < 0:
            raise ValueError(f"resolution_delay must be >= 0, got {resolution_delay}")
        self.catalog = catalog or DEFAULT_CATALOG
        self.opponent = opponent or RandomOpponent()
        self.scheduler = scheduler or ThreadingScheduler()
        self.resolution_delay = resolution_delay
        self.strict_busy = strict_busy

        self._state = SessionState(session_id=session_id or uuid.uuid4().hex[:8])
        self._lock = threading.RLock()
        self._settled = threading.Condition(self._lock)
        self._pending: Optional[ScheduledTask] = None
        self._listeners: List[StateListener] = []
        self._version = 0
        self._delivered = 0
        self._notify_lock = threading.RLock()

    @classmethod
    def from_config(
        cls,
        config: Dict[str, Any],
        scheduler: Optional[Scheduler] = None,
        opponent: Optional[OpponentStrategy] = None,
    ) -> "GameSession":
        """Build a session from a config dict (see rps_engine._config)."""
        validate_config(config)
        return cls(
            opponent=opponent or RandomOpponent(seed=config.get("seed")),
            scheduler=scheduler,
            resolution_delay=config.get(
                "resolution_delay_seconds", DEFAULT_RESOLUTION_DELAY_SECONDS
            ),
            strict_busy=config.get("strict_busy", False),
        )

    # ── Queries ──────────────────────────────────────────────

    @property
    def session_id(self) -> str:
        return self._state.session_id

    @property
    def is_busy(self) -> bool:
        with self._lock:
            return self._state.busy

    def all_moves(self) -> Tuple[Move, ...]:
        """The legal moves, for populating move-selection controls."""
        return self.catalog.all_moves()

    def current_state(self) -> SessionSnapshot:
        """Return a read-only snapshot of the session."""
        with self._lock:
            return build_snapshot(self._state)

    def wait_for_resolution(self, timeout: Optional[float] = None) -> SessionSnapshot:
        """
        Block until no resolution is pending, or until ``timeout`` expires.

        Returns the snapshot at wake-up; check ``busy`` to tell a timeout
        from a resolution.
        """
        with self._settled:
            self._settled.wait_for(lambda: not self._state.busy, timeout=timeout)
            return build_snapshot(self._state)

    # ── Listeners ────────────────────────────────────────────

    def subscribe(self, listener: StateListener) -> None:
        """
        Call ``listener(snapshot)`` after every state change.

        Snapshots arrive in order. One overtaken by a newer change before
        it could be delivered is skipped.
        """
        with self._notify_lock:
            if listener not in self._listeners:
                self._listeners.append(listener)

    def unsubscribe(self, listener: StateListener) -> None:
        """Stop notifying ``listener``. No-op if not subscribed."""
        with self._notify_lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    # ── Commands ─────────────────────────────────────────────

    def submit_move(self, player_move: MoveLike) -> bool:
        """
        Commit the player's move and schedule the resolution.

        Args:
            player_move: A catalog Move or its identifier

        Returns:
            True if the move was accepted, False if the session was busy

        Raises:
            InvalidMoveError: If the move is not in the catalog
            SessionBusyError: If busy and the session is strict
        """
        move = self.catalog.coerce(player_move)

        with self._lock:
            if self._state.busy:
                if self.strict_busy:
                    raise SessionBusyError(self._state.turn_state.value)
                logger.debug(
                    f"[{self.session_id}] Ignoring {move} while "
                    f"{self._state.turn_state.value}"
                )
                return False

            self._state.begin_turn(move)
            snapshot, version = self._capture()
            epoch = self._state.epoch
            self._pending = self.scheduler.schedule(
                self.resolution_delay,
                functools.partial(self._resolve, epoch),
            )

        logger.info(f"[{self.session_id}] Player chose {move}")
        self._notify(snapshot, version)
        return True

    def reset(self) -> None:
        """
        Zero the score and return to IDLE.

        The caller is responsible for confirming with the user first.
        Any pending resolution is cancelled and, should it fire anyway,
        discarded.
        """
        with self._lock:
            if self._pending is not None:
                self._pending.cancel()
                self._pending = None
            self._state.reset()
            snapshot, version = self._capture()
            self._settled.notify_all()

        self._notify(snapshot, version)

    # ── Internals ────────────────────────────────────────────

    def _resolve(self, epoch: int) -> None:
        """
        Resolution step; fired by the scheduler once per submission.

        If the opponent strategy fails, the turn is abandoned: the session
        returns to IDLE with the score untouched and accepts moves again.
        """
        with self._lock:
            state = self._state
            if epoch != state.epoch or state.turn_state is not TurnState.AWAITING_RESOLUTION:
                logger.info(
                    f"[{self.session_id}] Discarding stale resolution "
                    f"(epoch {epoch}, current {state.epoch})"
                )
                return

            try:
                opponent_move = self.catalog.coerce(
                    self.opponent.choose_move(self.catalog.all_moves())
                )
            except Exception:
                logger.exception(
                    f"[{self.session_id}] Opponent failed to choose a move; turn abandoned"
                )
                opponent_move = None
                state.abandon_turn()
            else:
                outcome = self.catalog.resolve(state.player_move, opponent_move)
                state.complete_turn(opponent_move, outcome)
            self._pending = None
            snapshot, version = self._capture()
            self._settled.notify_all()

        if opponent_move is not None:
            logger.info(
                f"[{self.session_id}] {snapshot.player_move} vs {opponent_move}: "
                f"player {outcome.value} (score {snapshot.score.player}-{snapshot.score.opponent})",
                extra={"snapshot": snapshot.to_log_dict()},
            )
        self._notify(snapshot, version)

    def _capture(self) -> Tuple[SessionSnapshot, int]:
        """Snapshot the state and number the change. Call with the lock held."""
        self._version += 1
        return build_snapshot(self._state), self._version

    def _notify(self, snapshot: SessionSnapshot, version: int) -> None:
        with self._notify_lock:
            if version <= self._delivered:
                logger.debug(
                    f"[{self.session_id}] Dropping superseded snapshot "
                    f"{version} (delivered {self._delivered})"
                )
                return
            self._delivered = version
            for listener in list(self._listeners):
                # A listener that changed the session has already delivered a newer snapshot
                if self._delivered != version:
                    break
                try:
                    listener(snapshot)
                except Exception:
                    logger.exception(f"[{self.session_id}] State listener failed")
