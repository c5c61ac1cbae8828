# Area: Session
"""
confidential_rps._session.enums — Session State Machine Enums
=============================================================

Defines the states and events of the session state machine.
"""

from enum import Enum


class SessionState(Enum):
    """
    States of the session state machine.

    State transitions:
    IDLE -> ROUND_IN_FLIGHT (on CHOICE_SUBMITTED)
    ROUND_IN_FLIGHT -> IDLE (on ROUND_RESOLVED or ROUND_FAILED)
    IDLE -> IDLE (on RESET)
    """
    IDLE = "IDLE"
    ROUND_IN_FLIGHT = "ROUND_IN_FLIGHT"


class SessionEvent(Enum):
    """
    Events that trigger state transitions in the session state machine.

    Events are triggered by:
    - CHOICE_SUBMITTED: submit_choice() accepted a valid move
    - ROUND_RESOLVED: the new state was stored and published
    - ROUND_FAILED: resolution or sealing raised; state left unchanged
    - RESET: reset() called
    """
    CHOICE_SUBMITTED = "CHOICE_SUBMITTED"
    ROUND_RESOLVED = "ROUND_RESOLVED"
    ROUND_FAILED = "ROUND_FAILED"
    RESET = "RESET"
