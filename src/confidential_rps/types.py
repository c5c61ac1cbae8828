"""
confidential_rps.types — TypedDict schemas for serialized payloads
==================================================================

Documents the exact structure of the dictionaries produced by
``GameState.to_dict()``, ``RoundOutcome.to_dict()`` and
``build_state_snapshot()``. Hosts that forward these payloads (to a
browser, a log shipper, ...) can reference these types.

    >>> GameStateDict.__annotations__
    {'playerScore': int, 'computerScore': int, 'rounds': int}
"""

from typing import Literal, Optional, TypedDict


ChoiceName = Literal["rock", "paper", "scissors"]
VerdictName = Literal["win", "lose", "tie"]


class GameStateDict(TypedDict):
    """Serialized score board."""
    playerScore: int        # rounds won by the player
    computerScore: int      # rounds won by the computer
    rounds: int             # rounds played, ties included


class RoundOutcomeDict(TypedDict):
    """Serialized result of one round.

    Fields
    ------
    playerChoice : str
        "rock", "paper" or "scissors".
    computerChoice : str
        The move drawn for the computer.
    verdict : str
        "win", "lose" or "tie", from the player's point of view.
    """
    playerChoice: ChoiceName
    computerChoice: ChoiceName
    verdict: VerdictName


class SnapshotDict(TypedDict):
    """Snapshot of a session, see build_state_snapshot()."""
    state: GameStateDict
    ties: int
    playerShare: Optional[float]    # None until a round has a winner
    lastRound: RoundOutcomeDict     # all fields None before the first round
