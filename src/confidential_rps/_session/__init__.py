# Area: Session
"""
Session - Round orchestration for one player against the computer.

This package handles:
- The IDLE/ROUND_IN_FLIGHT guard
- Running a round through resolver, state transition and sealer
- Publishing state changes and outcomes to observers
"""

from .enums import SessionState, SessionEvent
from .state_machine import SessionStateMachine
from .publisher import Observer, ObserverPublisher
from .controller import SessionController

__all__ = [
    "SessionState",
    "SessionEvent",
    "SessionStateMachine",
    "Observer",
    "ObserverPublisher",
    "SessionController",
]
