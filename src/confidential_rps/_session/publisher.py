# Area: Session
"""
confidential_rps._session.publisher — Observer publication
==========================================================

Delivers state changes and round outcomes to every subscribed
observer, in subscription order.
"""

import inspect
import logging
from typing import Any, List, Protocol

from .._engine.resolver import RoundOutcome
from .._engine.state import GameState

logger = logging.getLogger("confidential_rps.publisher")


class Observer(Protocol):
    """Protocol for session observers (see callbacks.SessionObserver)."""

    def on_state_changed(self, state: GameState) -> Any:
        ...

    def on_round_resolved(self, outcome: RoundOutcome) -> Any:
        ...


class ObserverPublisher:
    """
    Registry of observers and fan-out of session events.

    Observer exceptions propagate to the caller; later observers are
    not notified for that event.

    Usage:
        publisher = ObserverPublisher()
        publisher.subscribe(my_observer)
        await publisher.publish_state(state)
    """

    def __init__(self):
        """Initialize publisher with no observers."""
        self._observers: List[Observer] = []

    @property
    def observers(self) -> List[Observer]:
        return list(self._observers)

    def subscribe(self, observer: Observer) -> None:
        """
        Add an observer. Subscribing the same observer twice is a no-op.

        Args:
            observer: Object implementing on_state_changed/on_round_resolved
        """
        if observer in self._observers:
            return
        self._observers.append(observer)
        logger.debug(f"Subscribed {type(observer).__name__}")

    def unsubscribe(self, observer: Observer) -> None:
        """Remove an observer. No-op if it was never subscribed."""
        if observer in self._observers:
            self._observers.remove(observer)
            logger.debug(f"Unsubscribed {type(observer).__name__}")

    async def publish_state(self, state: GameState) -> None:
        """Call on_state_changed on every observer."""
        for observer in list(self._observers):
            await _call(observer.on_state_changed, state)

    async def publish_outcome(self, outcome: RoundOutcome) -> None:
        """Call on_round_resolved on every observer."""
        for observer in list(self._observers):
            await _call(observer.on_round_resolved, outcome)


async def _call(method, argument) -> None:
    """Invoke an observer method, awaiting it if it returned an awaitable."""
    result = method(argument)
    if inspect.isawaitable(result):
        await result
