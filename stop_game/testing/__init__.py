"""Simulated players for tests and demo runs"""

from .dummy_players import DummyAction, DummyMove, DummyPlayer, build_dummy_players, run_dummy_match

__all__ = ["DummyAction", "DummyMove", "DummyPlayer", "build_dummy_players", "run_dummy_match"]
