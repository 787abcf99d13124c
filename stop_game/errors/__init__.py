"""Error handling for the STOP match engine"""

from .handler import (
    InvalidSetup,
    InvalidTransition,
    NoLettersRemaining,
    StopGameError,
    describe_outcome,
    describe_reason,
)

__all__ = [
    "InvalidSetup",
    "InvalidTransition",
    "NoLettersRemaining",
    "StopGameError",
    "describe_outcome",
    "describe_reason",
]
