# Area: Engine
"""
confidential_rps._engine.state — Game state and its transitions
===============================================================

Holds the cumulative score of one session and the pure functions that
derive the next state from a round verdict. States are immutable:
every transition returns a new value.
"""

from __future__ import annotations
from typing import Any, Dict, Optional
import logging

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from .choices import Verdict

logger = logging.getLogger("confidential_rps.state")


class GameState(BaseModel):
    """
    Score board of one session.

    ``rounds`` counts every played round, ties included, so
    ``player_score + computer_score <= rounds`` always holds.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    player_score: int = Field(default=0, ge=0, strict=True)
    computer_score: int = Field(default=0, ge=0, strict=True)
    rounds: int = Field(default=0, ge=0, strict=True)

    @model_validator(mode="after")
    def check_scores_within_rounds(self) -> "GameState":
        if self.player_score + self.computer_score > self.rounds:
            raise ValueError(
                f"player_score + computer_score ({self.player_score + self.computer_score}) "
                f"exceeds rounds ({self.rounds})"
            )
        return self

    @property
    def ties(self) -> int:
        return self.rounds - self.player_score - self.computer_score

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


def initial() -> GameState:
    """Return the state a new session starts from."""
    return GameState(player_score=0, computer_score=0, rounds=0)


def apply(state: GameState, verdict: Verdict) -> GameState:
    """
    Derive the state that follows ``state`` after a round ending in ``verdict``.

    Args:
        state: The current state (left untouched)
        verdict: The verdict of the round just played

    Returns:
        A new GameState with ``rounds`` incremented and the winner's
        score incremented (no score change on a tie)
    """
    return GameState(
        player_score=state.player_score + (1 if verdict is Verdict.WIN else 0),
        computer_score=state.computer_score + (1 if verdict is Verdict.LOSE else 0),
        rounds=state.rounds + 1,
    )


def reset() -> GameState:
    """Return a fresh state, discarding history."""
    logger.debug("Game state reset")
    return initial()


def player_share(state: GameState) -> Optional[float]:
    """
    Player's share of the decided rounds, between 0.0 and 1.0.

    Returns None until at least one round has produced a winner.
    """
    decided = state.player_score + state.computer_score
    if decided == 0:
        return None
    return state.player_score / decided
