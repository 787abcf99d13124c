"""Tests for the STOP state bookkeeping helpers."""

from stop_game.game.state import StateManager
from stop_game.types.match import EliminationReason, OutcomeKind, Player


def _players(*flags: bool) -> tuple:
    return tuple(Player(name=f"p{i}", eliminated=flag) for i, flag in enumerate(flags))


def test_next_alive_index_wraps_around():
    players = _players(False, False, False)

    assert StateManager.next_alive_index(players, 0) == 1
    assert StateManager.next_alive_index(players, 2) == 0


def test_next_alive_index_skips_eliminated():
    players = _players(False, True, True, False)

    assert StateManager.next_alive_index(players, 0) == 3
    assert StateManager.next_alive_index(players, 3) == 0
    assert StateManager.next_alive_index(players, 1) == 3


def test_next_alive_index_returns_start_when_only_survivor():
    players = _players(True, False, True)
    assert StateManager.next_alive_index(players, 1) == 1


def test_next_alive_index_none_when_nobody_left():
    assert StateManager.next_alive_index(_players(True, True), 0) is None
    assert StateManager.next_alive_index((), 0) is None


def test_count_alive():
    assert StateManager.count_alive(_players(False, True, False)) == 2


def test_eliminate_current_returns_new_snapshot(match_state_factory):
    state = match_state_factory(current_letter="G", current_index=1)

    new_state = StateManager.eliminate_current(state, EliminationReason.DUPLICATE)

    assert new_state is not state
    assert not state.players[1].eliminated
    assert new_state.players[1].eliminated
    assert new_state.current_index == 2
    assert new_state.current_letter is None
    assert new_state.last_outcome.kind == OutcomeKind.ELIMINATED
    assert new_state.last_outcome.player_name == "B"


def test_eliminate_current_ends_match_atomically(match_state_factory):
    state = match_state_factory(names=["A", "B", "C"], eliminated=["A"], current_index=2)

    new_state = StateManager.eliminate_current(state, EliminationReason.VOTE)

    assert new_state.is_over
    assert new_state.winner_name == "B"
    assert new_state.current_index == 2


def test_pass_turn_clears_turn_fields(match_state_factory):
    state = match_state_factory(current_letter="M").model_copy(update={"last_word": "Macaco"})

    new_state = StateManager.pass_turn(state)

    assert new_state.current_index == 1
    assert new_state.current_letter is None
    assert new_state.last_word is None
    assert new_state.last_outcome.kind == OutcomeKind.PASSED
    assert not any(p.eliminated for p in new_state.players)


def test_compute_winner():
    assert StateManager.compute_winner(_players(True, False)) == "p1"
    assert StateManager.compute_winner(_players(False, False)) is None
