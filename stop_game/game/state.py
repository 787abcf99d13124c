"""State bookkeeping for STOP matches"""

from typing import Optional, Sequence

from stop_game.game.rules import RulesValidator
from stop_game.types.match import (
    EliminationReason,
    MatchState,
    OutcomeKind,
    Player,
    TurnOutcome,
    WordEntry,
)


class StateManager:
    """Builds successor snapshots; never mutates the one it is given"""

    @staticmethod
    def count_alive(players: Sequence[Player]) -> int:
        return sum(1 for player in players if not player.eliminated)

    @staticmethod
    def next_alive_index(players: Sequence[Player], start_from: int) -> Optional[int]:
        """
        Circular scan for the next player still in the match.

        Starts at (start_from + 1) mod N and walks at most N steps, so the
        player at start_from is considered last. Returns None when nobody
        is left.
        """
        total = len(players)
        if total == 0:
            return None

        index = start_from
        for _ in range(total):
            index = (index + 1) % total
            if not players[index].eliminated:
                return index
        return None

    @staticmethod
    def compute_winner(players: Sequence[Player]) -> Optional[str]:
        _, winner = RulesValidator.check_game_end_condition(players)
        return winner

    @staticmethod
    def eliminate_current(game_state: MatchState, reason: EliminationReason) -> MatchState:
        """Flag the current player and either end the match or move the turn on"""
        index = game_state.current_index
        eliminated_player = game_state.players[index]

        players = list(game_state.players)
        players[index] = eliminated_player.model_copy(update={"eliminated": True})
        players = tuple(players)

        outcome = TurnOutcome(
            player_name=eliminated_player.name,
            kind=OutcomeKind.ELIMINATED,
            reason=reason,
        )

        ended, winner = RulesValidator.check_game_end_condition(players)
        if ended:
            return game_state.model_copy(update={
                "players": players,
                "current_letter": None,
                "is_over": True,
                "winner_name": winner,
                "last_outcome": outcome,
            })

        return game_state.model_copy(update={
            "players": players,
            "current_index": StateManager.next_alive_index(players, index),
            "current_letter": None,
            "last_word": None,
            "last_outcome": outcome,
        })

    @staticmethod
    def accept_word(game_state: MatchState, word: str) -> MatchState:
        """Record an accepted word and hand the turn to the next alive player"""
        player = game_state.players[game_state.current_index]
        entry = WordEntry(
            player_name=player.name,
            letter=game_state.current_letter,
            word=word,
        )
        next_index = StateManager.next_alive_index(game_state.players, game_state.current_index)

        return game_state.model_copy(update={
            "used_words": game_state.used_words | {RulesValidator.normalize_word(word)},
            "accepted_words": game_state.accepted_words + (entry,),
            "last_word": word,
            "current_index": game_state.current_index if next_index is None else next_index,
            "current_letter": None,
            "last_outcome": TurnOutcome(
                player_name=player.name,
                kind=OutcomeKind.ACCEPTED,
                word=word,
            ),
        })

    @staticmethod
    def pass_turn(game_state: MatchState) -> MatchState:
        """End the turn without a word and without penalty"""
        player = game_state.players[game_state.current_index]
        next_index = StateManager.next_alive_index(game_state.players, game_state.current_index)

        return game_state.model_copy(update={
            "current_index": game_state.current_index if next_index is None else next_index,
            "current_letter": None,
            "last_word": None,
            "last_outcome": TurnOutcome(player_name=player.name, kind=OutcomeKind.PASSED),
        })

    @staticmethod
    def with_letter(game_state: MatchState, letter: str) -> MatchState:
        return game_state.model_copy(update={
            "current_letter": letter,
            "last_word": None,
            "used_letters": game_state.used_letters | {letter},
        })
