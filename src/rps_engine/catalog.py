# Area: Engine
"""
rps_engine.catalog — Legal moves and the beats relation
========================================================

Static enumeration of the three legal moves and the cyclic dominance
between them:

    rock     beats scissors
    paper    beats rock
    scissors beats paper

Moves are compared by identifier only; the glyph is display data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple, Union

from .errors import InvalidMoveError


@dataclass(frozen=True)
class Move:
    """A legal game selection."""
    identifier: str
    glyph: str = field(default="", compare=False)

    def __str__(self) -> str:
        return self.identifier


class Outcome(Enum):
    """Result of a resolution, seen from the first move's side."""
    WINS = "wins"
    LOSES = "loses"
    TIES = "ties"


ROCK = Move("rock", "✊")
PAPER = Move("paper", "📄")
SCISSORS = Move("scissors", "✂️")

# What each move beats: {winner: loser}
BEATS: Dict[str, str] = {
    ROCK.identifier: SCISSORS.identifier,
    PAPER.identifier: ROCK.identifier,
    SCISSORS.identifier: PAPER.identifier,
}

MoveLike = Union[Move, str]


class MoveCatalog:
    """
    The three legal moves in a fixed order plus the resolution rule.

    Every method that receives a move fails fast with InvalidMoveError
    when the move is not part of the catalog.
    """

    def __init__(self) -> None:
        self._moves: Tuple[Move, Move, Move] = (ROCK, PAPER, SCISSORS)
        self._by_id: Dict[str, Move] = {m.identifier: m for m in self._moves}

    def all_moves(self) -> Tuple[Move, Move, Move]:
        """Return (rock, paper, scissors), always the same singletons."""
        return self._moves

    def identifiers(self) -> Tuple[str, ...]:
        return tuple(self._by_id)

    def contains(self, move: object) -> bool:
        return isinstance(move, Move) and move.identifier in self._by_id

    def get(self, identifier: str) -> Move:
        """Look up a move by identifier (case-insensitive)."""
        if not isinstance(identifier, str):
            raise InvalidMoveError(identifier, self.identifiers())
        move = self._by_id.get(identifier.strip().lower())
        if move is None:
            raise InvalidMoveError(identifier, self.identifiers())
        return move

    def coerce(self, move: MoveLike) -> Move:
        """
        Return the catalog singleton for a Move or identifier string.

        Raises:
            InvalidMoveError: If the value does not name a legal move
        """
        if isinstance(move, Move):
            if move.identifier not in self._by_id:
                raise InvalidMoveError(move, self.identifiers())
            return self._by_id[move.identifier]
        return self.get(move)

    def beats(self, move: MoveLike) -> Move:
        """Return the move that ``move`` defeats."""
        return self._by_id[BEATS[self.coerce(move).identifier]]

    def beaten_by(self, move: MoveLike) -> Move:
        """Return the move that defeats ``move``."""
        target = self.coerce(move).identifier
        for winner, loser in BEATS.items():
            if loser == target:
                return self._by_id[winner]
        raise InvalidMoveError(move, self.identifiers())

    def resolve(self, a: MoveLike, b: MoveLike) -> Outcome:
        """
        Resolve ``a`` against ``b``.

        Returns:
            WINS if a beats b, LOSES if b beats a, TIES on equal moves
        """
        first = self.coerce(a)
        second = self.coerce(b)
        if first.identifier == second.identifier:
            return Outcome.TIES
        if BEATS[first.identifier] == second.identifier:
            return Outcome.WINS
        return Outcome.LOSES


DEFAULT_CATALOG = MoveCatalog()
