# Area: Host Callbacks
"""
confidential_rps.console_observer — Ready-made terminal observer
================================================================

Renders round results and the score board as plain text.
Used by the console host; also a minimal example of a SessionObserver.
"""

from __future__ import annotations
import sys
from typing import Optional, TextIO

from ._engine.choices import Verdict
from ._engine.resolver import RoundOutcome
from ._engine.state import GameState, player_share
from .callbacks import SessionObserver


# {verdict: (title, description)}
VERDICT_MESSAGES = {
    Verdict.WIN: ("Victory!", "You won this round!"),
    Verdict.LOSE: ("Defeat!", "The computer won this round."),
    Verdict.TIE: ("It's a tie!", "No winner this time."),
}


class ConsoleObserver(SessionObserver):
    """Prints every state change and round outcome to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def on_state_changed(self, state: GameState) -> None:
        self._write(render_score_board(state))

    def on_round_resolved(self, outcome: RoundOutcome) -> None:
        self._write(render_outcome(outcome))

    def _write(self, text: str) -> None:
        print(text, file=self.stream)
        self.stream.flush()


def render_outcome(outcome: RoundOutcome) -> str:
    """Two-line description of a round."""
    title, description = VERDICT_MESSAGES[outcome.verdict]
    return (
        f"You chose: {outcome.player_choice.value}  │  "
        f"Computer chose: {outcome.computer_choice.value}\n"
        f"{title} {description}"
    )


def render_score_board(state: GameState) -> str:
    """Score line, share bar and rounds played."""
    share = player_share(state)
    share_text = "–" if share is None else f"{share * 100:.0f}%"
    return (
        f"Player {state.player_score} : {state.computer_score} Computer"
        f"  │  Player share: {share_text}"
        f"  │  Rounds Played: {state.rounds}"
    )
