"""Game logic for the STOP match engine"""

from .clock import TurnClock
from .engine import MatchEngine
from .rules import RulesValidator
from .state import StateManager

__all__ = [
    "MatchEngine",
    "RulesValidator",
    "StateManager",
    "TurnClock",
]
