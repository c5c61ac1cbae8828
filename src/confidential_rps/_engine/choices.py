# Area: Engine
"""
confidential_rps._engine.choices — Moves and verdicts
=====================================================

Defines the three moves, the verdict of a round (always stated from
the player's side), and the cyclic "beats" relation between moves.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Dict

from ..errors import InvalidChoiceError


class Choice(Enum):
    """
    A move in Rock-Paper-Scissors.

    Rules:
    ROCK beats SCISSORS
    SCISSORS beats PAPER
    PAPER beats ROCK
    """
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"

    @classmethod
    def parse(cls, value: Any) -> "Choice":
        """
        Coerce a raw value into a Choice.

        Accepts a Choice or a case-insensitive move name.

        Raises:
            InvalidChoiceError: If the value is not one of the three moves
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for choice in cls:
                if choice.value == normalized:
                    return choice
        raise InvalidChoiceError(value, [c.value for c in cls])


class Verdict(Enum):
    """Outcome of a round, relative to the player."""
    WIN = "win"
    LOSE = "lose"
    TIE = "tie"


# {move: the move it defeats}
BEATS: Dict[Choice, Choice] = {
    Choice.ROCK: Choice.SCISSORS,
    Choice.SCISSORS: Choice.PAPER,
    Choice.PAPER: Choice.ROCK,
}


def beats(a: Choice, b: Choice) -> bool:
    """Return True iff move ``a`` defeats move ``b``."""
    return BEATS[a] is b
