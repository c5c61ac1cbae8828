# Area: Test Fixtures
"""Shared fixtures: scripted randomness and recording observers."""

import pytest

from confidential_rps._engine.choices import Choice


class FixedRandom:
    """RandomSource that returns scripted computer moves in order."""

    def __init__(self, *moves: Choice):
        self.moves = list(moves)
        self.calls = 0

    def choice(self, seq):
        self.calls += 1
        move = self.moves.pop(0)
        assert move in seq
        return move


class RecordingObserver:
    """Observer that records every published event in order."""

    def __init__(self):
        self.events = []

    def on_state_changed(self, state):
        self.events.append(("state", state))

    def on_round_resolved(self, outcome):
        self.events.append(("outcome", outcome))

    @property
    def states(self):
        return [payload for kind, payload in self.events if kind == "state"]

    @property
    def outcomes(self):
        return [payload for kind, payload in self.events if kind == "outcome"]


@pytest.fixture
def recorder():
    return RecordingObserver()
