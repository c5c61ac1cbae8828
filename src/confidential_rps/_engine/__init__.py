# Area: Engine
"""
Engine - Pure round resolution and state transitions.

This package handles:
- Moves, verdicts and the beats relation
- Game state and its transitions
- Round resolution against a random computer move
- The state confidentiality (seal/unseal) boundary
"""

from .choices import Choice, Verdict, BEATS, beats
from .state import GameState, initial, apply, reset, player_share
from .resolver import (
    RoundOutcome,
    RoundResolver,
    RandomSource,
    decide_verdict,
    resolve_round,
    DEFAULT_THINK_DELAY_SECONDS,
)
from .sealing import SealedState, StateSealer, PassThroughSealer
from .snapshot import build_state_snapshot

__all__ = [
    "Choice",
    "Verdict",
    "BEATS",
    "beats",
    "GameState",
    "initial",
    "apply",
    "reset",
    "player_share",
    "RoundOutcome",
    "RoundResolver",
    "RandomSource",
    "decide_verdict",
    "resolve_round",
    "DEFAULT_THINK_DELAY_SECONDS",
    "SealedState",
    "StateSealer",
    "PassThroughSealer",
    "build_state_snapshot",
]
