"""Match event journal"""

from .journal import MatchJournal

__all__ = ["MatchJournal"]
