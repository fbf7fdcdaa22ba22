# Area: Shared Tests
"""Shared fixtures for rps_engine tests."""

import logging

import pytest

from rps_engine import GameSession, ManualScheduler, MoveCatalog, ScheduledTask, ScriptedOpponent


class RecordingScheduler:
    """Scheduler that stores callbacks and ignores cancellation.

    Lets a test fire a resolution that the session already tried to
    cancel, to exercise the epoch guard.
    """

    def __init__(self):
        self.callbacks = []
        self.cancel_calls = 0

    def schedule(self, delay, callback):
        self.callbacks.append(callback)
        scheduler = self

        class _Task:
            def cancel(self):
                scheduler.cancel_calls += 1

        return _Task()

    def fire(self, index):
        self.callbacks[index]()


class ImmediateScheduler:
    """Scheduler that fires every callback inside schedule().

    The resolution then completes before submit_move() has notified
    listeners of the submission.
    """

    def schedule(self, delay, callback):
        task = ScheduledTask(delay, callback)
        task.run()
        return task


@pytest.fixture
def catalog():
    return MoveCatalog()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def recording_scheduler():
    return RecordingScheduler()


@pytest.fixture
def immediate_scheduler():
    return ImmediateScheduler()


@pytest.fixture
def make_session(scheduler):
    """Factory for sessions on the manual scheduler with a scripted opponent."""

    def _make(opponent_moves=("scissors",), **kwargs):
        kwargs.setdefault("scheduler", scheduler)
        return GameSession(opponent=ScriptedOpponent(opponent_moves), **kwargs)

    return _make


@pytest.fixture
def restore_package_logger():
    """Undo setup_logging() side effects on the package logger."""
    pkg_logger = logging.getLogger("rps_engine")
    handlers = list(pkg_logger.handlers)
    level = pkg_logger.level
    propagate = pkg_logger.propagate
    yield pkg_logger
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        pkg_logger.addHandler(handler)
    pkg_logger.setLevel(level)
    pkg_logger.propagate = propagate
