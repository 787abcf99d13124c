"""Vote session models for disputed words"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class VoteChoice(str, Enum):
    """A raised hand: eliminate (yes) or keep (no)"""
    YES = "yes"
    NO = "no"


class VoteSession(BaseModel):
    """Running tally of a show of hands"""
    model_config = ConfigDict(frozen=True)

    yes: int = Field(0, ge=0, description="Votes to eliminate the current player")
    no: int = Field(0, ge=0, description="Votes to keep the current player")

    @property
    def total(self) -> int:
        return self.yes + self.no

    @property
    def eliminates(self) -> bool:
        """Strict majority of yes votes; ties keep the player"""
        return self.yes > self.no
