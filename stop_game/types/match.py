"""Match state models for the STOP word game"""

from enum import Enum
from typing import FrozenSet, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Portuguese alphabet used for the draw (no K, W or Y)
LETTERS_PT: Tuple[str, ...] = (
    "A", "B", "C", "D", "E", "F", "G", "H", "I", "J", "L", "M",
    "N", "O", "P", "Q", "R", "S", "T", "U", "V", "X", "Z",
)

CATEGORIES: Tuple[str, ...] = (
    "Animais", "Países", "Comidas", "Profissões", "Filmes", "Marcas", "Esportes",
)


class EliminationReason(str, Enum):
    """Why a player left the match"""
    TIMEOUT = "timeout"
    BLANK = "blank"
    WRONG_LETTER = "wrong-letter"
    DUPLICATE = "duplicate"
    CONCEDE = "concede"
    VOTE = "vote"


class OutcomeKind(str, Enum):
    """How a turn ended"""
    ACCEPTED = "accepted"
    ELIMINATED = "eliminated"
    PASSED = "passed"


class MatchConfig(BaseModel):
    """Configuration for a STOP match"""
    model_config = ConfigDict(frozen=True)

    turn_seconds: int = Field(20, ge=1, description="Countdown per turn in seconds")
    alphabet: Tuple[str, ...] = Field(LETTERS_PT, min_length=1, description="Letters available to the draw")
    unique_letters: bool = Field(True, description="Whether a drawn letter is retired for the rest of the match")
    min_players: int = Field(2, ge=2, description="Minimum players required to start")

    @field_validator("alphabet")
    @classmethod
    def _uppercase_letters(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        letters = tuple(dict.fromkeys(letter.strip().upper() for letter in value))
        if any(len(letter) != 1 for letter in letters):
            raise ValueError("alphabet entries must be single characters")
        return letters


class Player(BaseModel):
    """A participant; never removed, only flagged"""
    model_config = ConfigDict(frozen=True)

    name: str
    eliminated: bool = False


class WordEntry(BaseModel):
    """History record of an accepted word"""
    model_config = ConfigDict(frozen=True)

    player_name: str
    letter: str
    word: str


class TurnOutcome(BaseModel):
    """Outcome of the transition that ended the last turn"""
    model_config = ConfigDict(frozen=True)

    player_name: str
    kind: OutcomeKind
    reason: Optional[EliminationReason] = None
    word: Optional[str] = None


class MatchState(BaseModel):
    """Immutable snapshot of a STOP match"""
    model_config = ConfigDict(frozen=True)

    category: str
    players: Tuple[Player, ...] = Field(default_factory=tuple)
    current_index: int = Field(0, ge=0)

    current_letter: Optional[str] = Field(None, description="Letter of the running turn (None before the draw)")
    used_words: FrozenSet[str] = Field(default_factory=frozenset, description="Accepted words, lowercased")
    used_letters: FrozenSet[str] = Field(default_factory=frozenset)
    accepted_words: Tuple[WordEntry, ...] = Field(default_factory=tuple)
    last_word: Optional[str] = None

    is_over: bool = False
    winner_name: Optional[str] = None

    last_outcome: Optional[TurnOutcome] = None
    config: MatchConfig = Field(default_factory=MatchConfig)


class MatchSummary(BaseModel):
    """Summary of a finished (or abandoned) match"""
    category: str
    winner: Optional[str]
    turns: int
    accepted_words: int
    elimination_order: Tuple[str, ...]
    letters_drawn: Tuple[str, ...]
