# Area: Session
"""
confidential_rps._session.controller — Session Controller
=========================================================

Owns the current game state and last round outcome of one session
and runs rounds end to end:

    submit_choice(choice)
      -> RoundResolver.resolve()          (suspends for the thinking delay)
      -> state.apply(verdict)             (new immutable state)
      -> StateSealer.seal() / unseal()    (confidentiality boundary)
      -> store, publish to observers
      -> back to IDLE

At most one round is in flight at a time. A choice submitted while a
round is in flight is ignored, not queued. Reset is only allowed while
idle and raises RoundInProgressError otherwise.
"""

from __future__ import annotations
import logging
from typing import Any, Iterable, Optional

from .._engine.choices import Choice
from .._engine.resolver import RoundOutcome, RoundResolver
from .._engine.sealing import PassThroughSealer, StateSealer
from .._engine.snapshot import build_state_snapshot
from .._engine.state import GameState, apply, initial
from .._engine.state import reset as reset_state
from ..errors import RoundInProgressError
from .enums import SessionEvent, SessionState
from .publisher import Observer, ObserverPublisher
from .state_machine import SessionStateMachine

logger = logging.getLogger("confidential_rps.session")


class SessionController:
    """
    Single-session game controller.

    Usage:
        controller = SessionController(
            resolver=RoundResolver(think_delay_seconds=1.5),
            sealer=PassThroughSealer(),
        )
        controller.subscribe(my_observer)
        outcome = await controller.submit_choice("rock")
        await controller.reset()
    """

    def __init__(
        self,
        resolver: Optional[RoundResolver] = None,
        sealer: Optional[StateSealer] = None,
        observers: Iterable[Observer] = (),
    ):
        self.resolver = resolver if resolver is not None else RoundResolver()
        self.sealer = sealer if sealer is not None else PassThroughSealer()
        self.publisher = ObserverPublisher()
        self.state_machine = SessionStateMachine()

        self._state: GameState = self.sealer.round_trip(initial())
        self._last_outcome: Optional[RoundOutcome] = None

        for observer in observers:
            self.subscribe(observer)

    # ── Read-only views ───────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def last_outcome(self) -> Optional[RoundOutcome]:
        return self._last_outcome

    @property
    def session_state(self) -> SessionState:
        return self.state_machine.current_state

    @property
    def is_round_in_flight(self) -> bool:
        return self.session_state is SessionState.ROUND_IN_FLIGHT

    def snapshot(self) -> dict:
        return build_state_snapshot(self._state, self._last_outcome)

    # ── Observers ─────────────────────────────────────────────

    def subscribe(self, observer: Observer) -> None:
        self.publisher.subscribe(observer)

    def unsubscribe(self, observer: Observer) -> None:
        self.publisher.unsubscribe(observer)

    # ── Entry points ──────────────────────────────────────────

    async def submit_choice(self, choice: Any) -> Optional[RoundOutcome]:
        """
        Play one round with the player's move.

        Args:
            choice: A Choice or move name ("rock", "paper", "scissors")

        Returns:
            The round's outcome, or None if the choice was ignored
            because another round is still in flight

        Raises:
            InvalidChoiceError: If the move is invalid (no state change)
            SerializationError: If the new state cannot be sealed
                (round abandoned, state unchanged)
        """
        if not self.state_machine.can_transition(SessionEvent.CHOICE_SUBMITTED):
            logger.warning(f"Ignored choice {choice!r}: round already in flight")
            return None

        player_choice = Choice.parse(choice)
        self.state_machine.transition(SessionEvent.CHOICE_SUBMITTED)
        self._last_outcome = None
        logger.info(
            f"Round {self._state.rounds + 1}: player chose {player_choice.value}"
        )

        stored = False
        try:
            outcome = await self.resolver.resolve(player_choice)
            next_state = self.sealer.round_trip(apply(self._state, outcome.verdict))

            self._state = next_state
            self._last_outcome = outcome
            stored = True
            logger.info(
                f"Round {next_state.rounds}: computer chose "
                f"{outcome.computer_choice.value} → {outcome.verdict.value} "
                f"(score {next_state.player_score}-{next_state.computer_score})"
            )

            await self.publisher.publish_state(next_state)
            await self.publisher.publish_outcome(outcome)
        finally:
            if stored:
                self.state_machine.transition(SessionEvent.ROUND_RESOLVED)
            else:
                logger.error("Round abandoned; state unchanged")
                self.state_machine.transition(SessionEvent.ROUND_FAILED)

        return outcome

    async def reset(self) -> GameState:
        """
        Restart the session from a zero score board.

        Returns:
            The fresh state

        Raises:
            RoundInProgressError: If a round is in flight
        """
        if not self.state_machine.can_transition(SessionEvent.RESET):
            raise RoundInProgressError("reset")

        self.state_machine.transition(SessionEvent.RESET)
        self._state = self.sealer.round_trip(reset_state())
        self._last_outcome = None
        logger.info("Session reset")

        await self.publisher.publish_state(self._state)
        return self._state
