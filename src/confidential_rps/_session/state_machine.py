# Area: Session
"""
confidential_rps._session.state_machine — Session State Machine
===============================================================

Tracks whether a round is in flight. The IDLE/ROUND_IN_FLIGHT guard
is what keeps at most one round running per session.
"""

import logging

from .enums import SessionState, SessionEvent

logger = logging.getLogger("confidential_rps.state_machine")


# Valid state transitions: {current_state: {event: next_state}}
TRANSITIONS = {
    SessionState.IDLE: {
        SessionEvent.CHOICE_SUBMITTED: SessionState.ROUND_IN_FLIGHT,
        SessionEvent.RESET: SessionState.IDLE,
    },
    SessionState.ROUND_IN_FLIGHT: {
        SessionEvent.ROUND_RESOLVED: SessionState.IDLE,
        SessionEvent.ROUND_FAILED: SessionState.IDLE,
    },
}


class SessionStateMachine:
    """
    State machine for the round lifecycle of one session.

    Attributes:
        current_state: The current state of the state machine
    """

    def __init__(self):
        """Initialize state machine in IDLE."""
        self.current_state = SessionState.IDLE

    @property
    def is_idle(self) -> bool:
        return self.current_state is SessionState.IDLE

    def can_transition(self, event: SessionEvent) -> bool:
        """
        Check if a transition is valid from current state.

        Args:
            event: The event to check

        Returns:
            True if the transition is valid, False otherwise
        """
        valid_transitions = TRANSITIONS.get(self.current_state, {})
        return event in valid_transitions

    def transition(self, event: SessionEvent) -> SessionState:
        """
        Execute a state transition.

        Args:
            event: The event triggering the transition

        Returns:
            The new state after transition

        Raises:
            ValueError: If the transition is not valid
        """
        if not self.can_transition(event):
            raise ValueError(
                f"Invalid transition: {event.value} from {self.current_state.value}"
            )

        next_state = TRANSITIONS[self.current_state][event]
        logger.debug(
            f"Transition: {self.current_state.value} --{event.value}--> {next_state.value}"
        )
        self.current_state = next_state
        return next_state
