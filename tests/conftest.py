"""Shared test fixtures for STOP match logic."""

import random
from collections.abc import Callable
from typing import Iterable, Optional

import pytest

from stop_game.game.engine import MatchEngine
from stop_game.types.match import MatchConfig, MatchState, Player


@pytest.fixture
def engine() -> MatchEngine:
    """Engine with a seeded random source."""
    return MatchEngine(rng=random.Random(1234))


@pytest.fixture
def match_state_factory() -> Callable[..., MatchState]:
    """Factory fixture that builds customizable match snapshots for tests."""

    def _factory(
        *,
        names: Optional[Iterable[str]] = None,
        eliminated: Optional[Iterable[str]] = None,
        current_index: int = 0,
        current_letter: Optional[str] = None,
        used_words: Optional[Iterable[str]] = None,
        used_letters: Optional[Iterable[str]] = None,
        category: str = "Animais",
        config: Optional[MatchConfig] = None,
    ) -> MatchState:
        base_names = list(names or ["A", "B", "C"])
        out = set(eliminated or [])

        letters = set(used_letters or [])
        if current_letter is not None:
            letters.add(current_letter)

        return MatchState(
            category=category,
            players=tuple(Player(name=name, eliminated=name in out) for name in base_names),
            current_index=current_index,
            current_letter=current_letter,
            used_words=frozenset(word.lower() for word in (used_words or [])),
            used_letters=frozenset(letters),
            config=config or MatchConfig(),
        )

    return _factory
