"""
Data models and contracts module.

Immutable data structures for challenges, participation attempts and
session credentials. Follows the frozen dataclass style used across the app.
"""

from .challenge import Challenge
from .credentials import Credentials
from .participation import OutcomeKind, ParticipationOutcome, ParticipationRequest

__all__ = [
    "Challenge",
    "Credentials",
    "OutcomeKind",
    "ParticipationOutcome",
    "ParticipationRequest",
]
