# Area: Engine Tests
"""Tests for GameState and its transitions."""

import pytest
from pydantic import ValidationError

from confidential_rps._engine.choices import Verdict
from confidential_rps._engine.state import (
    GameState,
    initial,
    apply,
    reset,
    player_share,
)


class TestInitialAndReset:
    """Tests for initial() and reset()."""

    def test_initial_is_all_zero(self):
        state = initial()
        assert (state.player_score, state.computer_score, state.rounds) == (0, 0, 0)

    def test_reset_equals_initial(self):
        assert reset() == initial()

    def test_reset_twice_is_idempotent(self):
        first = reset()
        second = reset()
        assert first == second == GameState()


class TestApply:
    """Tests for apply()."""

    def test_win_increments_player_and_rounds(self):
        assert apply(initial(), Verdict.WIN) == GameState(
            player_score=1, computer_score=0, rounds=1
        )

    def test_tie_increments_rounds_only(self):
        state = GameState(player_score=1, computer_score=0, rounds=1)
        assert apply(state, Verdict.TIE) == GameState(
            player_score=1, computer_score=0, rounds=2
        )

    def test_lose_increments_computer_and_rounds(self):
        state = GameState(player_score=1, computer_score=0, rounds=2)
        assert apply(state, Verdict.LOSE) == GameState(
            player_score=1, computer_score=1, rounds=3
        )

    def test_apply_does_not_mutate_input(self):
        state = GameState(player_score=2, computer_score=3, rounds=7)
        apply(state, Verdict.WIN)
        assert state == GameState(player_score=2, computer_score=3, rounds=7)

    def test_rounds_counts_every_verdict(self):
        """After N rounds: rounds == N and scores never exceed rounds."""
        verdicts = [Verdict.WIN, Verdict.TIE, Verdict.LOSE, Verdict.TIE, Verdict.WIN] * 4
        state = initial()
        previous = state
        for verdict in verdicts:
            state = apply(state, verdict)
            assert state.player_score >= previous.player_score
            assert state.computer_score >= previous.computer_score
            assert state.rounds == previous.rounds + 1
            previous = state

        assert state.rounds == len(verdicts)
        assert state.player_score == 8
        assert state.computer_score == 4
        assert state.ties == 8
        assert state.player_score + state.computer_score <= state.rounds


class TestGameStateModel:
    """Tests for GameState validation and serialization."""

    def test_state_is_frozen(self):
        state = initial()
        with pytest.raises(ValidationError):
            state.rounds = 5

    def test_negative_counters_rejected(self):
        with pytest.raises(ValidationError):
            GameState(player_score=-1, computer_score=0, rounds=0)

    def test_scores_cannot_exceed_rounds(self):
        with pytest.raises(ValidationError, match="exceeds rounds"):
            GameState(player_score=5, computer_score=2, rounds=0)

    @pytest.mark.parametrize("value", [True, "2", 3.0])
    def test_counters_must_be_plain_ints(self, value):
        with pytest.raises(ValidationError):
            GameState(player_score=value, computer_score=0, rounds=5)

    def test_to_dict_uses_camel_case(self):
        state = GameState(player_score=1, computer_score=2, rounds=4)
        assert state.to_dict() == {"playerScore": 1, "computerScore": 2, "rounds": 4}

    def test_accepts_camel_case_input(self):
        state = GameState.model_validate({"playerScore": 3, "computerScore": 1, "rounds": 5})
        assert state.player_score == 3
        assert state.ties == 1


class TestPlayerShare:
    """Tests for player_share()."""

    def test_undefined_before_any_decided_round(self):
        assert player_share(initial()) is None

    def test_ties_only_is_still_undefined(self):
        assert player_share(GameState(rounds=3)) is None

    def test_share_of_decided_rounds(self):
        state = GameState(player_score=3, computer_score=1, rounds=6)
        assert player_share(state) == pytest.approx(0.75)
