# Area: Engine
"""
confidential_rps._engine.snapshot — Session snapshot builder
============================================================

Builds serializable snapshots of the score board and last round for
logging and error reporting.
"""

from typing import Optional

from .resolver import RoundOutcome
from .state import GameState, player_share


def build_state_snapshot(
    state: GameState, outcome: Optional[RoundOutcome] = None
) -> dict:
    """Build serializable snapshot of the score board and last round."""
    return {
        "state": state.to_dict(),
        "ties": state.ties,
        "playerShare": player_share(state),
        "lastRound": outcome.to_dict() if outcome else _empty_round(),
    }


def _empty_round() -> dict:
    """Placeholder for a session that has not completed a round yet."""
    return {
        "playerChoice": None,
        "computerChoice": None,
        "verdict": None,
    }
