# Area: Opponents
"""
rps_engine.opponents — Opponent move strategies
================================================

The session asks an OpponentStrategy for the opponent's move when a
turn resolves. Subclass OpponentStrategy to plug in your own logic.

The entropy source is always injected: RandomOpponent draws from the
``random.Random`` instance it was given (or one it seeded itself),
never from the module-level generator.

Usage:
    from rps_engine import GameSession, RandomOpponent

    session = GameSession(opponent=RandomOpponent(seed=42))
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Sequence

from .catalog import DEFAULT_CATALOG, Move, MoveCatalog, MoveLike


class OpponentStrategy(ABC):
    """Abstract base class for opponent move selection."""

    @abstractmethod
    def choose_move(self, moves: Sequence[Move]) -> Move:
        """
        Pick the opponent's move.

        Parameters
        ----------
        moves : Sequence[Move]
            The legal moves, in catalog order.

        Returns
        -------
        Move
            One element of ``moves``.
        """


class RandomOpponent(OpponentStrategy):
    """Uniform random opponent: each legal move has equal probability."""

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        """
        Args:
            rng: Random generator to draw from. Takes precedence over seed.
            seed: Seed for a private generator when rng is not given.
        """
        self.seed = seed
        self._rng = rng if rng is not None else random.Random(seed)

    def choose_move(self, moves: Sequence[Move]) -> Move:
        if not moves:
            raise ValueError("choose_move() needs at least one move")
        return moves[self._rng.randrange(len(moves))]


class ScriptedOpponent(OpponentStrategy):
    """Replays a fixed sequence of moves, cycling when exhausted."""

    def __init__(self, sequence: Iterable[MoveLike], catalog: Optional[MoveCatalog] = None):
        catalog = catalog or DEFAULT_CATALOG
        self._sequence: List[Move] = [catalog.coerce(m) for m in sequence]
        if not self._sequence:
            raise ValueError("ScriptedOpponent needs at least one move")
        self._index = 0

    @property
    def calls(self) -> int:
        """Number of moves handed out so far."""
        return self._index

    def choose_move(self, moves: Sequence[Move]) -> Move:
        move = self._sequence[self._index % len(self._sequence)]
        self._index += 1
        for candidate in moves:
            if candidate == move:
                return candidate
        raise ValueError(f"Scripted move {move} is not among the legal moves")
