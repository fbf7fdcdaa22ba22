# Area: Engine Tests
"""Tests for MoveCatalog — legal moves and the beats relation."""

import itertools

import pytest

from rps_engine.catalog import (
    BEATS,
    DEFAULT_CATALOG,
    PAPER,
    ROCK,
    SCISSORS,
    Move,
    MoveCatalog,
    Outcome,
)
from rps_engine.errors import InvalidMoveError


class TestAllMoves:
    """Tests for all_moves()."""

    def test_order_is_rock_paper_scissors(self, catalog):
        assert [m.identifier for m in catalog.all_moves()] == ["rock", "paper", "scissors"]

    def test_returns_the_same_singletons_every_call(self, catalog):
        first = catalog.all_moves()
        second = catalog.all_moves()
        assert all(a is b for a, b in zip(first, second))
        assert first[0] is ROCK and first[1] is PAPER and first[2] is SCISSORS

    def test_separate_catalogs_share_singletons(self):
        assert MoveCatalog().all_moves()[0] is DEFAULT_CATALOG.all_moves()[0]

    def test_glyphs_are_display_only(self):
        assert ROCK.glyph == "✊"
        assert Move("rock", "🪨") == ROCK
        assert hash(Move("rock")) == hash(ROCK)


class TestResolve:
    """Tests for resolve() and the cyclic dominance."""

    def test_every_move_ties_itself(self, catalog):
        for move in catalog.all_moves():
            assert catalog.resolve(move, move) is Outcome.TIES

    def test_never_both_win(self, catalog):
        for a, b in itertools.product(catalog.all_moves(), repeat=2):
            assert not (
                catalog.resolve(a, b) is Outcome.WINS
                and catalog.resolve(b, a) is Outcome.WINS
            )

    def test_exactly_three_winning_pairs(self, catalog):
        wins = {
            (a.identifier, b.identifier)
            for a, b in itertools.product(catalog.all_moves(), repeat=2)
            if catalog.resolve(a, b) is Outcome.WINS
        }
        assert wins == {("rock", "scissors"), ("scissors", "paper"), ("paper", "rock")}

    def test_loses_mirrors_wins(self, catalog):
        for a, b in itertools.product(catalog.all_moves(), repeat=2):
            if catalog.resolve(a, b) is Outcome.WINS:
                assert catalog.resolve(b, a) is Outcome.LOSES

    @pytest.mark.parametrize("a,b,expected", [
        ("rock", "scissors", Outcome.WINS),
        ("paper", "rock", Outcome.WINS),
        ("scissors", "paper", Outcome.WINS),
        ("rock", "paper", Outcome.LOSES),
        ("paper", "scissors", Outcome.LOSES),
        ("scissors", "rock", Outcome.LOSES),
    ])
    def test_accepts_identifiers(self, catalog, a, b, expected):
        assert catalog.resolve(a, b) is expected

    def test_compares_by_identifier_not_glyph(self, catalog):
        assert catalog.resolve(Move("rock", "?"), ROCK) is Outcome.TIES

    def test_beats_table_has_no_self_loops(self):
        assert all(winner != loser for winner, loser in BEATS.items())

    def test_unknown_move_fails_fast(self, catalog):
        with pytest.raises(InvalidMoveError) as exc_info:
            catalog.resolve(Move("lizard"), ROCK)
        assert exc_info.value.valid_moves == ("rock", "paper", "scissors")


class TestLookup:
    """Tests for get(), coerce(), contains(), beats() and beaten_by()."""

    def test_get_is_case_insensitive(self, catalog):
        assert catalog.get(" Rock ") is ROCK

    @pytest.mark.parametrize("bad", ["lizard", "", 42, None])
    def test_get_rejects_unknown(self, catalog, bad):
        with pytest.raises(InvalidMoveError):
            catalog.get(bad)

    def test_coerce_returns_singleton(self, catalog):
        assert catalog.coerce(Move("paper", "x")) is PAPER
        assert catalog.coerce("scissors") is SCISSORS

    def test_contains(self, catalog):
        assert catalog.contains(ROCK)
        assert not catalog.contains(Move("spock"))
        assert not catalog.contains("rock")

    def test_beats_and_beaten_by(self, catalog):
        assert catalog.beats(ROCK) is SCISSORS
        assert catalog.beaten_by(ROCK) is PAPER
        for move in catalog.all_moves():
            assert catalog.beaten_by(catalog.beats(move)) is move
