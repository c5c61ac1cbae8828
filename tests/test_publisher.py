# Area: Session Tests
"""Tests for ObserverPublisher."""

from unittest.mock import Mock

import pytest
from confidential_rps._engine.choices import Choice, Verdict
from confidential_rps._engine.resolver import RoundOutcome
from confidential_rps._engine.state import GameState
from confidential_rps._session.publisher import ObserverPublisher


OUTCOME = RoundOutcome(Choice.ROCK, Choice.SCISSORS, Verdict.WIN)


class AsyncObserver:
    def __init__(self):
        self.states = []
        self.outcomes = []

    async def on_state_changed(self, state):
        self.states.append(state)

    async def on_round_resolved(self, outcome):
        self.outcomes.append(outcome)


class TestObserverPublisher:
    """Tests for subscription and fan-out."""

    @pytest.mark.asyncio
    async def test_publishes_to_all_observers(self):
        publisher = ObserverPublisher()
        first, second = Mock(), Mock()
        publisher.subscribe(first)
        publisher.subscribe(second)

        state = GameState(player_score=1, rounds=1)
        await publisher.publish_state(state)
        await publisher.publish_outcome(OUTCOME)

        for observer in (first, second):
            observer.on_state_changed.assert_called_once_with(state)
            observer.on_round_resolved.assert_called_once_with(OUTCOME)

    @pytest.mark.asyncio
    async def test_awaits_async_observers(self):
        publisher = ObserverPublisher()
        observer = AsyncObserver()
        publisher.subscribe(observer)

        await publisher.publish_state(GameState())
        await publisher.publish_outcome(OUTCOME)

        assert observer.states == [GameState()]
        assert observer.outcomes == [OUTCOME]

    def test_duplicate_subscribe_ignored(self):
        publisher = ObserverPublisher()
        observer = Mock()
        publisher.subscribe(observer)
        publisher.subscribe(observer)
        assert publisher.observers == [observer]

    @pytest.mark.asyncio
    async def test_unsubscribed_observer_not_called(self):
        publisher = ObserverPublisher()
        observer = Mock()
        publisher.subscribe(observer)
        publisher.unsubscribe(observer)
        publisher.unsubscribe(observer)

        await publisher.publish_state(GameState())
        observer.on_state_changed.assert_not_called()

    @pytest.mark.asyncio
    async def test_observer_exception_propagates(self):
        publisher = ObserverPublisher()
        broken = Mock()
        broken.on_state_changed.side_effect = RuntimeError("render failed")
        later = Mock()
        publisher.subscribe(broken)
        publisher.subscribe(later)

        with pytest.raises(RuntimeError, match="render failed"):
            await publisher.publish_state(GameState())
        later.on_state_changed.assert_not_called()
