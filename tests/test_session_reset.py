# Area: Engine Tests
"""Tests for GameSession.reset() and stale resolutions."""

import threading

from rps_engine import GameSession, PAPER, ROCK, ScriptedOpponent, TurnState


class TestReset:
    """Tests for reset() from each turn state."""

    def test_reset_when_idle_is_idempotent(self, make_session):
        session = make_session()
        session.reset()
        session.reset()
        snapshot = session.current_state()
        assert snapshot.turn_state is TurnState.IDLE
        assert (snapshot.score.player, snapshot.score.opponent) == (0, 0)

    def test_reset_after_resolution_zeroes_everything(self, make_session, scheduler):
        session = make_session(["scissors", "paper"])
        session.submit_move(ROCK)
        scheduler.advance(1.5)
        session.submit_move(ROCK)
        scheduler.advance(1.5)
        assert session.current_state().score.opponent == 1

        session.reset()
        snapshot = session.current_state()
        assert snapshot.turn_state is TurnState.IDLE
        assert snapshot.player_move is None
        assert snapshot.opponent_move is None
        assert snapshot.outcome is None
        assert (snapshot.score.player, snapshot.score.opponent) == (0, 0)
        assert snapshot.game_started is False
        assert snapshot.busy is False

    def test_repeated_resets_keep_zero_score(self, make_session, scheduler):
        session = make_session(["scissors"])
        session.submit_move(ROCK)
        scheduler.advance(1.5)
        for _ in range(3):
            session.reset()
            snapshot = session.current_state()
            assert snapshot.turn_state is TurnState.IDLE
            assert (snapshot.score.player, snapshot.score.opponent) == (0, 0)

    def test_reset_bumps_epoch(self, make_session):
        session = make_session()
        session.reset()
        session.reset()
        assert session.current_state().epoch == 2


class TestResetWhilePending:
    """reset() racing an in-flight resolution."""

    def test_pending_task_is_cancelled(self, make_session, scheduler):
        session = make_session(["scissors"])
        session.submit_move(ROCK)
        session.reset()

        assert scheduler.pending_count() == 0
        scheduler.advance(10.0)
        snapshot = session.current_state()
        assert snapshot.turn_state is TurnState.IDLE
        assert (snapshot.score.player, snapshot.score.opponent) == (0, 0)

    def test_stale_resolution_firing_anyway_is_discarded(self, recording_scheduler):
        opponent = ScriptedOpponent(["scissors"])
        session = GameSession(opponent=opponent, scheduler=recording_scheduler)
        session.submit_move(ROCK)
        session.reset()
        assert recording_scheduler.cancel_calls == 1

        recording_scheduler.fire(0)

        snapshot = session.current_state()
        assert snapshot.turn_state is TurnState.IDLE
        assert (snapshot.score.player, snapshot.score.opponent) == (0, 0)
        assert snapshot.player_move is None
        assert opponent.calls == 0

    def test_stale_resolution_does_not_hijack_new_turn(self, recording_scheduler):
        session = GameSession(
            opponent=ScriptedOpponent(["scissors"]), scheduler=recording_scheduler,
        )
        session.submit_move(ROCK)
        session.reset()
        session.submit_move(PAPER)

        recording_scheduler.fire(0)
        snapshot = session.current_state()
        assert snapshot.turn_state is TurnState.AWAITING_RESOLUTION
        assert snapshot.player_move is PAPER

        recording_scheduler.fire(1)
        snapshot = session.current_state()
        assert snapshot.turn_state is TurnState.RESOLVED
        assert (snapshot.score.player, snapshot.score.opponent) == (0, 1)

    def test_duplicate_fire_applies_once(self, recording_scheduler):
        session = GameSession(
            opponent=ScriptedOpponent(["scissors"]), scheduler=recording_scheduler,
        )
        session.submit_move(ROCK)
        recording_scheduler.fire(0)
        recording_scheduler.fire(0)
        assert session.current_state().score.player == 1

    def test_session_accepts_moves_after_reset(self, make_session, scheduler):
        session = make_session(["scissors"])
        session.submit_move(ROCK)
        session.reset()
        assert session.submit_move(ROCK) is True
        scheduler.advance(1.5)
        assert session.current_state().score.player == 1

    def test_reset_wakes_waiters(self, make_session):
        session = make_session()
        session.submit_move(ROCK)
        woke = []

        def waiter():
            woke.append(session.wait_for_resolution(timeout=5))

        thread = threading.Thread(target=waiter)
        thread.start()
        session.reset()
        thread.join(timeout=5)

        assert not thread.is_alive()
        assert woke[0].turn_state is TurnState.IDLE
