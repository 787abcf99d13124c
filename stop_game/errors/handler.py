"""
Error types and outcome descriptions for the STOP match engine.

Only setup validation and letter exhaustion abort an operation. Wrong letters,
repeated words and timeouts are ordinary outcomes recorded on the snapshot;
this module turns them into text a presentation layer can show.
"""

import logging
from typing import Optional

from stop_game.types.match import EliminationReason, OutcomeKind, TurnOutcome

logger = logging.getLogger(__name__)


class StopGameError(Exception):
    """Base class for engine failures."""


class InvalidSetup(StopGameError):
    """A match could not be constructed from the given category and names."""


class NoLettersRemaining(StopGameError):
    """Every letter of the alphabet has already been drawn in this match."""

    def __init__(self, used: int):
        super().__init__(f"All {used} letters have already been drawn")
        self.used = used


class InvalidTransition(StopGameError):
    """A command was issued in a state that does not accept it."""


REASON_MESSAGES = {
    EliminationReason.TIMEOUT: "time ran out",
    EliminationReason.BLANK: "no word was given",
    EliminationReason.WRONG_LETTER: "the word starts with the wrong letter",
    EliminationReason.DUPLICATE: "the word was already used",
    EliminationReason.CONCEDE: "gave up the turn",
    EliminationReason.VOTE: "lost the vote",
}


def describe_reason(reason: EliminationReason) -> str:
    return REASON_MESSAGES.get(reason, reason.value)


def describe_outcome(outcome: Optional[TurnOutcome]) -> str:
    """
    Render the last turn outcome as a one-line message.

    Args:
        outcome: Outcome stored on the snapshot, or None before any turn ended

    Returns:
        Human readable message (empty string when there is no outcome)
    """
    if outcome is None:
        return ""

    if outcome.kind == OutcomeKind.ACCEPTED:
        return f"{outcome.player_name} said '{outcome.word}'"

    if outcome.kind == OutcomeKind.PASSED:
        return f"{outcome.player_name} kept by vote, turn passes"

    if outcome.reason is None:
        logger.warning(f"Elimination of {outcome.player_name} has no reason attached")
        return f"{outcome.player_name} is eliminated"

    return f"{outcome.player_name} is eliminated: {describe_reason(outcome.reason)}"
