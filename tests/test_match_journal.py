"""Tests for the in-memory match journal."""

import random

from stop_game.errors.handler import describe_outcome
from stop_game.game.engine import MatchEngine
from stop_game.logging.journal import MatchJournal
from stop_game.types.vote import VoteChoice


def _play_scripted_match():
    engine = MatchEngine(rng=random.Random(11))
    journal = MatchJournal()

    state = engine.new_match("Animais", ["Ana", "Bruno", "Caio"])
    journal.start(state)

    def step(new_state, vote=None):
        journal.record_transition(step.state, new_state, vote=vote)
        step.state = new_state
        return new_state

    step.state = state

    state = step(engine.draw_letter(state))
    state = step(engine.submit_word(state, f"{state.current_letter}um"))        # Ana accepted
    state = step(engine.draw_letter(state))
    state = step(engine.submit_word(state, ""))                                 # Bruno blank
    state = step(engine.draw_letter(state))
    session = engine.cast_vote(engine.open_vote(), VoteChoice.NO)
    state = step(engine.resolve_vote(state, session), vote=session)             # Caio kept
    state = step(engine.concede(state))                                         # Ana concedes
    return journal, state


def test_journal_records_each_transition():
    journal, state = _play_scripted_match()

    kinds = [event["event"] for event in journal.events]
    assert kinds == [
        "match_created",
        "letter_drawn",
        "word_accepted",
        "letter_drawn",
        "player_eliminated",
        "letter_drawn",
        "vote_resolved",
        "turn_passed",
        "player_eliminated",
        "match_over",
    ]

    blank = journal.events_of("player_eliminated")[0]
    assert blank["player"] == "Bruno"
    assert blank["reason"] == "blank"
    assert journal.events_of("match_over")[0]["winner"] == "Caio"
    assert state.winner_name == "Caio"


def test_journal_summary():
    journal, state = _play_scripted_match()

    summary = journal.summary()

    assert summary.category == "Animais"
    assert summary.winner == "Caio"
    assert summary.turns == 4
    assert summary.accepted_words == 1
    assert summary.elimination_order == ("Bruno", "Ana")
    assert len(summary.letters_drawn) == 3
    assert set(summary.letters_drawn) == set(state.used_letters)


def test_describe_outcome_messages():
    journal, state = _play_scripted_match()

    assert describe_outcome(None) == ""
    assert describe_outcome(state.last_outcome) == "Ana is eliminated: gave up the turn"
