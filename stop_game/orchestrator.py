"""Match orchestrator - owns the single live snapshot and couples it to the turn clock"""

import logging
from typing import Callable, Iterable, Optional

from stop_game.errors.handler import InvalidTransition
from stop_game.game.clock import TurnClock
from stop_game.game.engine import MatchEngine
from stop_game.logging.journal import MatchJournal
from stop_game.types.match import EliminationReason, MatchConfig, MatchState, Player
from stop_game.types.vote import VoteChoice, VoteSession

logger = logging.getLogger(__name__)


class MatchOrchestrator:
    """
    Drives one match for a presentation layer or test harness.

    Every command replaces the held snapshot wholesale. The clock is armed when
    a letter is drawn and cancelled whenever the turn ends or a vote opens, so
    at most one countdown and one vote session are live at a time. Clock
    methods need a running event loop, so commands that draw letters must be
    issued from inside one.
    """

    def __init__(
        self,
        engine: Optional[MatchEngine] = None,
        journal: Optional[MatchJournal] = None,
        tick_interval: float = 1.0,
        on_state_change: Optional[Callable[[MatchState], None]] = None,
    ):
        self.engine = engine or MatchEngine()
        self.journal = journal or MatchJournal()
        self.clock = TurnClock(self._on_clock_expired, tick_interval=tick_interval)
        self.on_state_change = on_state_change

        self.state: Optional[MatchState] = None
        self.vote: Optional[VoteSession] = None

    def start_match(
        self,
        category: str,
        player_names: Iterable[str],
        config: Optional[MatchConfig] = None
    ) -> MatchState:
        """Create a new match, replacing any previous one."""
        self.clock.cancel()
        self.vote = None
        self.state = self.engine.new_match(category, player_names, config)
        self.journal.start(self.state)
        self._notify()
        return self.state

    def draw_letter(self) -> MatchState:
        state = self._require_state()
        if self.vote is not None:
            raise InvalidTransition("Resolve the open vote before drawing a letter")
        self._apply(self.engine.draw_letter(state))
        return self.state

    def submit_word(self, raw: str) -> MatchState:
        """Judge a word using the clock's remaining time; late answers are ignored."""
        state = self._require_state()
        if state.is_over or state.current_letter is None:
            logger.warning(f"Ignoring late submission '{raw}': turn already ended")
            return state
        if self.vote is not None:
            raise InvalidTransition("Resolve the open vote before submitting a word")
        self._apply(self.engine.submit_word(state, raw, seconds_left=self.clock.remaining))
        return self.state

    def concede(self) -> MatchState:
        state = self._require_state()
        self.vote = None
        self._apply(self.engine.concede(state))
        return self.state

    def open_vote(self) -> VoteSession:
        """Pause the turn for a show of hands."""
        state = self._require_state()
        if state.is_over:
            raise InvalidTransition("The match is already over")
        self.clock.cancel()
        self.vote = self.engine.open_vote()
        logger.info(f"Vote opened on {state.players[state.current_index].name}")
        return self.vote

    def cast_vote(self, choice: VoteChoice) -> VoteSession:
        if self.vote is None:
            raise InvalidTransition("No vote is open")
        self.vote = self.engine.cast_vote(self.vote, choice)
        return self.vote

    def resolve_vote(self) -> MatchState:
        state = self._require_state()
        if self.vote is None:
            raise InvalidTransition("No vote is open")
        session, self.vote = self.vote, None
        self._apply(self.engine.resolve_vote(state, session), vote=session)
        return self.state

    @property
    def current_player(self) -> Optional[Player]:
        return self.engine.current_player(self._require_state())

    @property
    def alive_count(self) -> int:
        return self.engine.alive_count(self._require_state())

    @property
    def is_over(self) -> bool:
        return self.state is not None and self.engine.is_over(self.state)

    def close(self) -> None:
        self.clock.cancel()
        self.vote = None

    def _on_clock_expired(self, reason: EliminationReason) -> None:
        state = self.state
        if state is None or state.is_over or state.current_letter is None:
            return
        logger.info(f"Countdown expired for {state.players[state.current_index].name}")
        self._apply(self.engine.expire_turn(state))

    def _apply(self, new_state: MatchState, vote: Optional[VoteSession] = None) -> None:
        previous = self.state

        # The clock is armed before the snapshot is committed
        if new_state.current_letter is None:
            self.clock.cancel()
            self.vote = None
        elif new_state.current_letter != previous.current_letter:
            self.clock.start(new_state.config.turn_seconds)

        self.state = new_state
        self.journal.record_transition(previous, new_state, vote=vote)

        self._notify()

    def _notify(self) -> None:
        if self.on_state_change is not None:
            self.on_state_change(self.state)

    def _require_state(self) -> MatchState:
        if self.state is None:
            raise InvalidTransition("No match has been started")
        return self.state
