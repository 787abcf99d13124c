"""Word and letter rules for STOP turns"""

from typing import Optional, Sequence, Tuple

from stop_game.types.match import EliminationReason, MatchState, Player


class RulesValidator:
    """Checks submitted words against the STOP rules"""

    @staticmethod
    def normalize_word(raw: str) -> str:
        """Key used for duplicate detection"""
        return raw.strip().lower()

    @staticmethod
    def initial_of(word: str) -> str:
        return word[:1].upper()

    @staticmethod
    def check_submission(
        game_state: MatchState,
        raw: str,
        seconds_left: Optional[float] = None
    ) -> Optional[EliminationReason]:
        """
        Check a submitted word for the running turn.
        Returns the elimination reason, or None when the word is accepted.

        Checks run in a fixed order and the first failure wins:
        timeout, blank, wrong letter, duplicate.
        """
        if seconds_left is not None and seconds_left <= 0:
            return EliminationReason.TIMEOUT

        word = raw.strip()
        if not word:
            return EliminationReason.BLANK

        if RulesValidator.initial_of(word) != game_state.current_letter:
            return EliminationReason.WRONG_LETTER

        if RulesValidator.normalize_word(word) in game_state.used_words:
            return EliminationReason.DUPLICATE

        return None

    @staticmethod
    def letter_pool(game_state: MatchState) -> Tuple[str, ...]:
        """Letters the next draw may pick, in alphabet order"""
        alphabet = game_state.config.alphabet
        if not game_state.config.unique_letters:
            return alphabet
        return tuple(letter for letter in alphabet if letter not in game_state.used_letters)

    @staticmethod
    def check_game_end_condition(players: Sequence[Player]) -> tuple[bool, Optional[str]]:
        """
        Check whether the match is decided.
        Returns (ended, winner_name); winner_name is None when nobody is left.
        """
        alive = [player for player in players if not player.eliminated]

        if len(alive) == 1:
            return True, alive[0].name

        if not alive:
            return True, None

        return False, None
