"""Data types for the STOP match engine"""

from .match import (
    CATEGORIES,
    LETTERS_PT,
    EliminationReason,
    MatchConfig,
    MatchState,
    MatchSummary,
    OutcomeKind,
    Player,
    TurnOutcome,
    WordEntry,
)
from .vote import VoteChoice, VoteSession

__all__ = [
    # Match types
    "CATEGORIES",
    "LETTERS_PT",
    "EliminationReason",
    "MatchConfig",
    "MatchState",
    "MatchSummary",
    "OutcomeKind",
    "Player",
    "TurnOutcome",
    "WordEntry",
    # Vote types
    "VoteChoice",
    "VoteSession",
]
