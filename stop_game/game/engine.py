"""Match engine for the STOP word game"""

import logging
import random
from typing import Iterable, Optional

from stop_game.errors.handler import InvalidSetup, InvalidTransition, NoLettersRemaining
from stop_game.game.rules import RulesValidator
from stop_game.game.state import StateManager
from stop_game.types.match import EliminationReason, MatchConfig, MatchState, Player
from stop_game.types.vote import VoteChoice, VoteSession

logger = logging.getLogger(__name__)


class MatchEngine:
    """Pure transitions from (MatchState, command) to a new MatchState."""

    def __init__(
        self,
        config: Optional[MatchConfig] = None,
        rng: Optional[random.Random] = None
    ):
        self.config = config or MatchConfig()
        self.rng = rng or random.Random()
        self.rules_validator = RulesValidator()
        self.state_manager = StateManager()

    def new_match(
        self,
        category: str,
        player_names: Iterable[str],
        config: Optional[MatchConfig] = None
    ) -> MatchState:
        """Create a match from a category label and the raw list of names."""
        config = config or self.config

        category = (category or "").strip()
        if not category:
            raise InvalidSetup("Category must not be blank")

        names = []
        seen = set()
        for raw in player_names:
            name = (raw or "").strip()
            if not name or name.casefold() in seen:
                continue
            seen.add(name.casefold())
            names.append(name)

        if len(names) < config.min_players:
            raise InvalidSetup(
                f"At least {config.min_players} distinct, non-blank player names are required "
                f"(got {len(names)})"
            )

        game_state = MatchState(
            category=category,
            players=tuple(Player(name=name) for name in names),
            config=config,
        )

        logger.info(f"Created match '{category}' with {len(names)} players: {', '.join(names)}")
        return game_state

    def draw_letter(self, game_state: MatchState) -> MatchState:
        """Draw the letter for the current player's turn."""
        self._require_running(game_state)
        if game_state.current_letter is not None:
            raise InvalidTransition(
                f"Letter {game_state.current_letter} is already drawn for this turn"
            )

        pool = self.rules_validator.letter_pool(game_state)
        if not pool:
            raise NoLettersRemaining(len(game_state.used_letters))

        letter = self.rng.choice(pool)
        logger.info(f"Drew letter {letter} for {self._current_name(game_state)}")
        return self.state_manager.with_letter(game_state, letter)

    def submit_word(
        self,
        game_state: MatchState,
        raw: str,
        seconds_left: Optional[float] = None
    ) -> MatchState:
        """
        Judge the current player's answer.

        Args:
            game_state: Snapshot with a letter drawn
            raw: The word as typed
            seconds_left: Countdown value at submission time, if a clock is running

        Returns:
            Successor snapshot; rejected words eliminate the player instead of raising
        """
        self._require_running(game_state)
        if game_state.current_letter is None:
            raise InvalidTransition("No letter has been drawn for this turn")

        reason = self.rules_validator.check_submission(game_state, raw or "", seconds_left)
        if reason is not None:
            return self._eliminate(game_state, reason)

        word = raw.strip()
        logger.info(
            f"Accepted '{word}' from {self._current_name(game_state)} "
            f"on letter {game_state.current_letter}"
        )
        return self.state_manager.accept_word(game_state, word)

    def expire_turn(self, game_state: MatchState) -> MatchState:
        """Eliminate the current player because the countdown reached zero."""
        self._require_running(game_state)
        return self._eliminate(game_state, EliminationReason.TIMEOUT)

    def concede(self, game_state: MatchState) -> MatchState:
        """The current player gives up, with or without a letter drawn."""
        self._require_running(game_state)
        return self._eliminate(game_state, EliminationReason.CONCEDE)

    def open_vote(self) -> VoteSession:
        return VoteSession()

    def cast_vote(self, session: VoteSession, choice: VoteChoice) -> VoteSession:
        choice = VoteChoice(choice)
        if choice == VoteChoice.YES:
            return session.model_copy(update={"yes": session.yes + 1})
        return session.model_copy(update={"no": session.no + 1})

    def resolve_vote(self, game_state: MatchState, session: VoteSession) -> MatchState:
        """Apply a show of hands: a strict yes majority eliminates, anything else passes the turn."""
        self._require_running(game_state)

        if session.eliminates:
            logger.info(f"Vote {session.yes}-{session.no} against {self._current_name(game_state)}")
            return self._eliminate(game_state, EliminationReason.VOTE)

        logger.info(
            f"Vote {session.yes}-{session.no} keeps {self._current_name(game_state)}; turn passes"
        )
        return self.state_manager.pass_turn(game_state)

    def alive_count(self, game_state: MatchState) -> int:
        return self.state_manager.count_alive(game_state.players)

    def current_player(self, game_state: MatchState) -> Optional[Player]:
        """Player whose turn it is; None once the match is over or nobody is left."""
        if game_state.is_over or not game_state.players:
            return None
        player = game_state.players[game_state.current_index]
        return None if player.eliminated else player

    def is_over(self, game_state: MatchState) -> bool:
        return game_state.is_over

    def _eliminate(self, game_state: MatchState, reason: EliminationReason) -> MatchState:
        name = self._current_name(game_state)
        new_state = self.state_manager.eliminate_current(game_state, reason)

        logger.info(f"{name} eliminated ({reason.value}); {self.alive_count(new_state)} left")
        if new_state.is_over:
            logger.info(f"Match '{new_state.category}' over. Winner: {new_state.winner_name}")
        return new_state

    def _require_running(self, game_state: MatchState) -> None:
        if game_state.is_over:
            raise InvalidTransition("The match is already over")
        if not game_state.players:
            raise InvalidTransition("The match has no players")

    @staticmethod
    def _current_name(game_state: MatchState) -> str:
        return game_state.players[game_state.current_index].name
