# Area: Session Tests
"""Tests for the session state machine."""

import pytest
from confidential_rps._session.state_machine import SessionStateMachine, TRANSITIONS
from confidential_rps._session.enums import SessionState, SessionEvent


class TestSessionStateMachineBase:
    """Tests for basic state machine functionality."""

    def test_initial_state_is_idle(self):
        sm = SessionStateMachine()
        assert sm.current_state == SessionState.IDLE
        assert sm.is_idle is True

    def test_can_submit_when_idle(self):
        sm = SessionStateMachine()
        assert sm.can_transition(SessionEvent.CHOICE_SUBMITTED) is True

    def test_cannot_resolve_when_idle(self):
        sm = SessionStateMachine()
        assert sm.can_transition(SessionEvent.ROUND_RESOLVED) is False

    def test_transition_raises_on_invalid(self):
        sm = SessionStateMachine()
        with pytest.raises(ValueError):
            sm.transition(SessionEvent.ROUND_FAILED)


class TestSessionStateMachineTransitions:
    """Tests for the round lifecycle."""

    def test_round_cycle(self):
        sm = SessionStateMachine()
        assert sm.transition(SessionEvent.CHOICE_SUBMITTED) == SessionState.ROUND_IN_FLIGHT
        assert sm.is_idle is False
        assert sm.transition(SessionEvent.ROUND_RESOLVED) == SessionState.IDLE

    def test_failed_round_returns_to_idle(self):
        sm = SessionStateMachine()
        sm.transition(SessionEvent.CHOICE_SUBMITTED)
        sm.transition(SessionEvent.ROUND_FAILED)
        assert sm.current_state == SessionState.IDLE

    def test_no_second_submit_while_in_flight(self):
        sm = SessionStateMachine()
        sm.transition(SessionEvent.CHOICE_SUBMITTED)
        assert sm.can_transition(SessionEvent.CHOICE_SUBMITTED) is False

    def test_no_reset_while_in_flight(self):
        sm = SessionStateMachine()
        sm.transition(SessionEvent.CHOICE_SUBMITTED)
        assert sm.can_transition(SessionEvent.RESET) is False
        with pytest.raises(ValueError):
            sm.transition(SessionEvent.RESET)

    def test_reset_from_idle_stays_idle(self):
        sm = SessionStateMachine()
        assert sm.transition(SessionEvent.RESET) == SessionState.IDLE
        assert sm.transition(SessionEvent.RESET) == SessionState.IDLE

    def test_every_state_has_transitions(self):
        assert set(TRANSITIONS.keys()) == set(SessionState)
