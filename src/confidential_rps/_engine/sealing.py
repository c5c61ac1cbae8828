# Area: Engine
"""
confidential_rps._engine.sealing — State confidentiality boundary
=================================================================

Every state the session stores passes through a StateSealer: it is
sealed into an opaque SealedState and unsealed back. Only the sealer
that produced a SealedState knows how to read its payload.

PassThroughSealer serializes to JSON and back without encrypting
anything. A real scheme plugs in by subclassing StateSealer; the
session controller only ever sees ``seal``/``unseal``.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
import logging

from pydantic import ValidationError

from ..errors import SerializationError
from .state import GameState

logger = logging.getLogger("confidential_rps.sealing")


@dataclass(frozen=True)
class SealedState:
    """
    Opaque sealed game state.

    Attributes:
        payload: Scheme-specific encoded state
        scheme: Name of the sealer that produced the payload
    """

    payload: str = field(repr=False)
    scheme: str


class StateSealer(ABC):
    """
    Abstract confidentiality boundary for game states.

    Implementations must satisfy ``unseal(seal(s)) == s`` for every
    valid state, and raise SerializationError for anything else.
    """

    scheme: str = "abstract"

    @abstractmethod
    def seal(self, state: GameState) -> SealedState:
        """Seal a state. Raises SerializationError if the state is invalid."""
        pass

    @abstractmethod
    def unseal(self, sealed: SealedState) -> GameState:
        """Recover a state. Raises SerializationError if the payload is unusable."""
        pass

    def round_trip(self, state: GameState) -> GameState:
        """Seal then unseal, as the session does for each new state."""
        return self.unseal(self.seal(state))


class PassThroughSealer(StateSealer):
    """
    No-op sealer: the payload is the state's JSON, unencrypted.

    The JSON uses the camelCase keys of the serialized score board
    (``playerScore``, ``computerScore``, ``rounds``).
    """

    scheme = "passthrough"

    def seal(self, state: GameState) -> SealedState:
        if not isinstance(state, GameState):
            raise SerializationError(
                f"expected GameState, got {type(state).__name__}"
            )
        # model_construct() skips validation, so check invariants again here
        raw = state.model_dump(by_alias=True)
        try:
            GameState.model_validate(raw)
        except ValidationError as e:
            raise SerializationError(_describe(e), payload=raw) from e

        payload = state.model_dump_json(by_alias=True)
        logger.debug(f"Sealed state ({self.scheme}): {len(payload)} bytes")
        return SealedState(payload=payload, scheme=self.scheme)

    def unseal(self, sealed: SealedState) -> GameState:
        if not isinstance(sealed, SealedState):
            raise SerializationError(
                f"expected SealedState, got {type(sealed).__name__}"
            )
        if sealed.scheme != self.scheme:
            raise SerializationError(
                f"cannot unseal '{sealed.scheme}' payload with '{self.scheme}' sealer",
                payload={"scheme": sealed.scheme},
            )
        try:
            state = GameState.model_validate_json(sealed.payload)
        except ValidationError as e:
            raise SerializationError(
                _describe(e), payload={"payload": sealed.payload}
            ) from e
        logger.debug(f"Unsealed state ({self.scheme})")
        return state


def _describe(error: ValidationError) -> str:
    """One-line summary of a pydantic validation error."""
    parts = []
    for item in error.errors():
        location = ".".join(str(p) for p in item.get("loc", ())) or "state"
        parts.append(f"{location}: {item.get('msg', 'invalid')}")
    return "; ".join(parts)
