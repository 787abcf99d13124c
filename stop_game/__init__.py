"""STOP word game match engine"""

from stop_game.errors.handler import InvalidSetup, InvalidTransition, NoLettersRemaining, StopGameError
from stop_game.game.clock import TurnClock
from stop_game.game.engine import MatchEngine
from stop_game.orchestrator import MatchOrchestrator
from stop_game.types.match import EliminationReason, MatchConfig, MatchState, Player, WordEntry
from stop_game.types.vote import VoteChoice, VoteSession

__all__ = [
    "EliminationReason",
    "InvalidSetup",
    "InvalidTransition",
    "MatchConfig",
    "MatchEngine",
    "MatchOrchestrator",
    "MatchState",
    "NoLettersRemaining",
    "Player",
    "StopGameError",
    "TurnClock",
    "VoteChoice",
    "VoteSession",
    "WordEntry",
]
