"""
confidential_rps — Confidential Rock Paper Scissors
===================================================

Player-versus-computer Rock-Paper-Scissors engine whose score board
passes through a sealing boundary on every change.

Quick Start (terminal game):
    python -m confidential_rps

Embedding:
    from confidential_rps import SessionController, SessionObserver

    class MyView(SessionObserver):
        def on_state_changed(self, state): ...
        def on_round_resolved(self, outcome): ...

    controller = SessionController(observers=[MyView()])
    outcome = await controller.submit_choice("rock")
    await controller.reset()

Custom sealing:
    from confidential_rps import StateSealer
    class MySealer(StateSealer): ...   # Implement seal() and unseal()
    controller = SessionController(sealer=MySealer())
"""

from .callbacks import SessionObserver
from .console_observer import ConsoleObserver
from ._engine.choices import Choice, Verdict, beats
from ._engine.state import GameState, initial, apply, reset, player_share
from ._engine.resolver import RoundOutcome, RoundResolver, RandomSource, resolve_round
from ._engine.sealing import SealedState, StateSealer, PassThroughSealer
from ._engine.snapshot import build_state_snapshot
from ._session.enums import SessionState
from ._session.controller import SessionController
from ._config import GameConfig, load_config
from ._shared.logging_config import setup_logging
from .errors import (
    RPSGameError,
    InvalidChoiceError,
    SerializationError,
    RoundInProgressError,
)
from .types import GameStateDict, RoundOutcomeDict, SnapshotDict

__all__ = [
    # Main classes
    "SessionController",
    "SessionObserver",
    "ConsoleObserver",
    "RoundResolver",
    "StateSealer",
    "PassThroughSealer",
    # Domain
    "Choice",
    "Verdict",
    "beats",
    "GameState",
    "RoundOutcome",
    "RandomSource",
    "SealedState",
    "SessionState",
    # State transitions
    "initial",
    "apply",
    "reset",
    "player_share",
    "resolve_round",
    "build_state_snapshot",
    # Configuration
    "GameConfig",
    "load_config",
    "setup_logging",
    # Errors
    "RPSGameError",
    "InvalidChoiceError",
    "SerializationError",
    "RoundInProgressError",
    # Serialized payload types
    "GameStateDict",
    "RoundOutcomeDict",
    "SnapshotDict",
]
__version__ = "1.0.0"
