# Area: Host Callbacks
"""
confidential_rps.callbacks — The observer interface hosts implement
===================================================================

A host (terminal, web view, bot, ...) subclasses SessionObserver and
subscribes it to a SessionController. The controller calls the two
methods whenever something worth rendering happens. Hosts never touch
the game state directly.

Either method may be a coroutine function; the controller awaits it.
"""

from abc import ABC, abstractmethod

from ._engine.resolver import RoundOutcome
from ._engine.state import GameState


class SessionObserver(ABC):
    """
    Abstract base class for session observers.

    Subclass this and implement both methods.
    """

    # ──────────────────────────────────────────────────────────────
    # CALLBACK 1: The score board changed
    # ──────────────────────────────────────────────────────────────
    @abstractmethod
    def on_state_changed(self, state: GameState) -> None:
        """
        Called after every completed round and after every reset.

        Parameters
        ----------
        state : GameState
            The new, immutable score board:
            ``state.player_score``, ``state.computer_score``, ``state.rounds``.
        """
        ...

    # ──────────────────────────────────────────────────────────────
    # CALLBACK 2: A round was resolved
    # ──────────────────────────────────────────────────────────────
    @abstractmethod
    def on_round_resolved(self, outcome: RoundOutcome) -> None:
        """
        Called once per completed round, after on_state_changed and
        before the next choice is accepted.

        Parameters
        ----------
        outcome : RoundOutcome
            ``outcome.player_choice``, ``outcome.computer_choice`` and
            ``outcome.verdict`` (WIN/LOSE/TIE from the player's side).

        Example
        -------
        >>> def on_round_resolved(self, outcome):
        ...     if outcome.is_win:
        ...         self.launch_confetti()
        """
        ...
