# Area: Engine
"""
rps_engine._engine.scheduler — Delayed resolution scheduling
============================================================

A GameSession never blocks on the resolution delay. It hands a callback
to a Scheduler, which fires it once after the delay unless the returned
ScheduledTask is cancelled first.

Three implementations:

- ThreadingScheduler: one daemon ``threading.Timer`` per task (default).
- AsyncioScheduler: ``loop.call_later`` on an asyncio event loop.
- ManualScheduler: tasks fire only when the owner advances the clock,
  for deterministic tests and step-driven hosts.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from typing import Callable, List, Optional, Protocol

logger = logging.getLogger("rps_engine.scheduler")

Callback = Callable[[], None]


class ScheduledTask:
    """Handle for a single-shot delayed callback."""

    def __init__(self, delay: float, callback: Callback) -> None:
        self.delay = delay
        self._callback = callback
        self._lock = threading.Lock()
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        """Prevent the callback from running. No-op once fired."""
        with self._lock:
            if self.fired or self.cancelled:
                return
            self.cancelled = True
        logger.debug("Scheduled task cancelled (delay %.2fs)", self.delay)
        self._on_cancel()

    def run(self) -> None:
        """Run the callback once, unless cancelled."""
        with self._lock:
            if self.fired or self.cancelled:
                return
            self.fired = True
        self._callback()

    @property
    def pending(self) -> bool:
        return not (self.fired or self.cancelled)

    def _on_cancel(self) -> None:
        """Hook for subclasses that hold an underlying timer."""


class Scheduler(Protocol):
    """Anything that can run a callback once after a delay."""

    def schedule(self, delay: float, callback: Callback) -> ScheduledTask:
        ...


# ── Threading ────────────────────────────────────────────────


class _TimerTask(ScheduledTask):

    def __init__(self, delay: float, callback: Callback) -> None:
        super().__init__(delay, callback)
        self.timer = threading.Timer(delay, self.run)
        self.timer.daemon = True

    def _on_cancel(self) -> None:
        self.timer.cancel()


class ThreadingScheduler:
    """Fires callbacks on ``threading.Timer`` worker threads."""

    def schedule(self, delay: float, callback: Callback) -> ScheduledTask:
        task = _TimerTask(delay, callback)
        task.timer.start()
        logger.debug("Timer scheduled (%.2fs)", delay)
        return task


# ── Asyncio ──────────────────────────────────────────────────


class _LoopTask(ScheduledTask):

    def __init__(self, delay: float, callback: Callback) -> None:
        super().__init__(delay, callback)
        self.handle: Optional[asyncio.TimerHandle] = None

    def _on_cancel(self) -> None:
        if self.handle is not None:
            self.handle.cancel()


class AsyncioScheduler:
    """
    Fires callbacks on an asyncio event loop.

    When no loop is given, the loop running at ``schedule()`` time is used,
    so scheduling must happen from inside a coroutine or loop callback.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    def schedule(self, delay: float, callback: Callback) -> ScheduledTask:
        loop = self._loop or asyncio.get_running_loop()
        task = _LoopTask(delay, callback)
        task.handle = loop.call_later(delay, task.run)
        return task


# ── Manual clock ─────────────────────────────────────────────


class _DueTask(ScheduledTask):

    def __init__(self, delay: float, callback: Callback, due_at: float) -> None:
        super().__init__(delay, callback)
        self.due_at = due_at


class ManualScheduler:
    """
    Scheduler driven explicitly by its owner.

    Keeps a virtual clock starting at 0.0 unless a ``clock`` callable is
    injected (e.g. ``time.monotonic``). Tasks fire, in due order, only
    from ``advance()`` or ``run_due()``.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock
        self._now = 0.0
        self._tasks: List[_DueTask] = []

    def now(self) -> float:
        return self._clock() if self._clock is not None else self._now

    def schedule(self, delay: float, callback: Callback) -> ScheduledTask:
        task = _DueTask(delay, callback, self.now() + delay)
        self._tasks.append(task)
        logger.debug("Task due at %.2f", task.due_at)
        return task

    def advance(self, seconds: float) -> int:
        """
        Move the virtual clock forward and fire every task now due.

        Returns:
            Number of tasks that fired
        """
        if seconds < 0:
            raise ValueError("Cannot move the clock backwards")
        if self._clock is not None:
            raise RuntimeError("advance() needs the virtual clock; call run_due() instead")
        self._now += seconds
        return self.run_due()

    def run_due(self) -> int:
        """Fire every pending task whose due time has passed."""
        now = self.now()
        due = sorted(
            (t for t in self._tasks if t.pending and now >= t.due_at),
            key=lambda t: t.due_at,
        )
        self._tasks = [t for t in self._tasks if t.pending and t not in due]
        for task in due:
            task.run()
        return sum(1 for t in due if t.fired)

    def pending_count(self) -> int:
        return sum(1 for t in self._tasks if t.pending)

    def clear(self) -> None:
        """Cancel and drop every pending task."""
        for task in self._tasks:
            task.cancel()
        self._tasks.clear()
