# Area: Engine
"""
confidential_rps._engine.resolver — Round resolution
====================================================

Draws the computer's move and decides the verdict of a round.

``resolve_round`` is the pure decision; ``RoundResolver`` wraps it with
the fixed "computer thinking" pause, which is the only suspension point
of a round.
"""

from __future__ import annotations
import asyncio
import logging
import math
import random
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, Sequence, TypeVar

from .choices import Choice, Verdict, beats

logger = logging.getLogger("confidential_rps.resolver")

T = TypeVar("T")

CHOICES = tuple(Choice)

# Default computer "thinking" pause (seconds)
DEFAULT_THINK_DELAY_SECONDS = 1.5


class RandomSource(Protocol):
    """Anything that can pick an element of a sequence (e.g. random.Random)."""

    def choice(self, seq: Sequence[T]) -> T:
        ...


@dataclass(frozen=True)
class RoundOutcome:
    """
    Result of a single round.

    Attributes:
        player_choice: The move the player committed
        computer_choice: The move drawn for the computer
        verdict: WIN/LOSE/TIE from the player's point of view
    """

    player_choice: Choice
    computer_choice: Choice
    verdict: Verdict

    @property
    def is_win(self) -> bool:
        return self.verdict is Verdict.WIN

    @property
    def is_tie(self) -> bool:
        return self.verdict is Verdict.TIE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "playerChoice": self.player_choice.value,
            "computerChoice": self.computer_choice.value,
            "verdict": self.verdict.value,
        }


def decide_verdict(player_choice: Choice, computer_choice: Choice) -> Verdict:
    """Verdict of ``player_choice`` against ``computer_choice``."""
    if player_choice is computer_choice:
        return Verdict.TIE
    if beats(player_choice, computer_choice):
        return Verdict.WIN
    return Verdict.LOSE


def resolve_round(player_choice: Any, rng: RandomSource) -> RoundOutcome:
    """
    Resolve one round against a uniformly drawn computer move.

    Args:
        player_choice: The player's move (Choice or move name)
        rng: Source of randomness used to draw the computer's move

    Returns:
        The RoundOutcome of the round

    Raises:
        InvalidChoiceError: If player_choice is not a valid move
    """
    choice = Choice.parse(player_choice)
    computer_choice = rng.choice(CHOICES)
    verdict = decide_verdict(choice, computer_choice)
    logger.debug(
        f"Resolved {choice.value} vs {computer_choice.value}: {verdict.value}"
    )
    return RoundOutcome(
        player_choice=choice,
        computer_choice=computer_choice,
        verdict=verdict,
    )


class RoundResolver:
    """
    Resolves rounds after a fixed "thinking" pause.

    The pause yields to the event loop; it never blocks a thread.

    Usage:
        resolver = RoundResolver(rng=random.Random(7), think_delay_seconds=0)
        outcome = await resolver.resolve(Choice.ROCK)
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        think_delay_seconds: float = DEFAULT_THINK_DELAY_SECONDS,
    ):
        if not math.isfinite(think_delay_seconds) or think_delay_seconds < 0:
            raise ValueError("think_delay_seconds must be a finite number >= 0")
        self.rng = rng if rng is not None else random.Random()
        self.think_delay_seconds = think_delay_seconds

    async def resolve(self, player_choice: Any) -> RoundOutcome:
        """
        Validate the move, wait for the thinking delay, then resolve.

        Raises:
            InvalidChoiceError: Before any delay, if the move is invalid
        """
        choice = Choice.parse(player_choice)
        if self.think_delay_seconds:
            await asyncio.sleep(self.think_delay_seconds)
        return resolve_round(choice, self.rng)
