# Area: Shared Tests
"""Tests for the rps_engine exception hierarchy."""

from rps_engine.errors import InvalidMoveError, RPSEngineError, SessionBusyError


class TestErrors:
    """Tests for error types and their context."""

    def test_hierarchy(self):
        assert issubclass(InvalidMoveError, RPSEngineError)
        assert issubclass(SessionBusyError, RPSEngineError)

    def test_invalid_move_context(self):
        error = InvalidMoveError("lizard", ("rock", "paper", "scissors"))
        assert error.move == "lizard"
        assert "rock, paper, scissors" in str(error)
        assert error.to_log_fields()["valid_moves"] == ["rock", "paper", "scissors"]

    def test_session_busy_context(self):
        error = SessionBusyError("AWAITING_RESOLUTION")
        assert error.turn_state == "AWAITING_RESOLUTION"
        assert error.to_log_fields() == {
            "error_type": "SESSION_BUSY",
            "turn_state": "AWAITING_RESOLUTION",
        }

    def test_base_log_fields(self):
        assert RPSEngineError("x").to_log_fields() == {"error_type": "RPSEngineError"}
