"""In-memory event journal for a single STOP match.

Events are kept for the lifetime of the match only; nothing is written to disk.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from stop_game.types.match import MatchState, MatchSummary, OutcomeKind
from stop_game.types.vote import VoteSession

logger = logging.getLogger(__name__)


def _serialize_for_log(obj: Any) -> Any:
    """Flatten enums and sets so events stay plain data."""
    if isinstance(obj, dict):
        return {k: _serialize_for_log(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [_serialize_for_log(item) for item in obj]
    elif isinstance(obj, (set, frozenset)):
        return sorted(_serialize_for_log(item) for item in obj)
    elif hasattr(obj, 'value'):  # Enum
        return obj.value
    else:
        return obj


class MatchJournal:
    """Records what happened in a match, derived from successive snapshots."""

    def __init__(self):
        self.events: List[Dict[str, Any]] = []
        self._category: Optional[str] = None

    def record(self, event: str, **data: Any) -> Dict[str, Any]:
        entry = {
            "event": event,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            **_serialize_for_log(data),
        }
        self.events.append(entry)
        logger.debug(f"Journal event {event}: {data}")
        return entry

    def start(self, game_state: MatchState) -> None:
        self.events.clear()
        self._category = game_state.category
        self.record(
            "match_created",
            category=game_state.category,
            players=[player.name for player in game_state.players],
            turn_seconds=game_state.config.turn_seconds,
        )

    def record_transition(
        self,
        previous: MatchState,
        current: MatchState,
        vote: Optional[VoteSession] = None
    ) -> None:
        """Append the events implied by moving from one snapshot to the next."""
        if vote is not None:
            self.record("vote_resolved", yes=vote.yes, no=vote.no,
                        player=previous.players[previous.current_index].name)

        if current.current_letter is not None and current.current_letter != previous.current_letter:
            self.record(
                "letter_drawn",
                letter=current.current_letter,
                player=current.players[current.current_index].name,
            )

        outcome = current.last_outcome
        if outcome is not None and outcome is not previous.last_outcome:
            if outcome.kind == OutcomeKind.ACCEPTED:
                self.record("word_accepted", player=outcome.player_name,
                            letter=previous.current_letter, word=outcome.word)
            elif outcome.kind == OutcomeKind.ELIMINATED:
                self.record("player_eliminated", player=outcome.player_name,
                            reason=outcome.reason, letter=previous.current_letter)
            else:
                self.record("turn_passed", player=outcome.player_name)

        if current.is_over and not previous.is_over:
            self.record("match_over", winner=current.winner_name)

    def events_of(self, event: str) -> List[Dict[str, Any]]:
        return [entry for entry in self.events if entry["event"] == event]

    def summary(self) -> MatchSummary:
        """Summarize the match from the recorded events."""
        ended = self.events_of("match_over")
        turns = (
            len(self.events_of("word_accepted"))
            + len(self.events_of("player_eliminated"))
            + len(self.events_of("turn_passed"))
        )

        return MatchSummary(
            category=self._category or "",
            winner=ended[-1]["winner"] if ended else None,
            turns=turns,
            accepted_words=len(self.events_of("word_accepted")),
            elimination_order=tuple(e["player"] for e in self.events_of("player_eliminated")),
            letters_drawn=tuple(e["letter"] for e in self.events_of("letter_drawn")),
        )
