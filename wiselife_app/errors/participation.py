"""
Participation error classifications.

Each class corresponds to exactly one kind of failed participation attempt.
The controller never raises these to the page; they are built from the
server's response so the outcome can be logged and inspected uniformly.
"""

from typing import Optional, Dict, Any


class ParticipationError(Exception):
    """Base class for a failed participation attempt."""

    kind = "unclassified"

    def __init__(self, message: str, challenge_id: Optional[int] = None,
                 status: Optional[int] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.challenge_id = challenge_id
        self.status = status
        self.context = context or {}
        self.recoverable = False


class CapacityExceededError(ParticipationError):
    """The challenge already has its maximum number of members."""

    kind = "capacity_exceeded"


class InsufficientBalanceError(ParticipationError):
    """The user must top up their balance before joining a paid challenge."""

    kind = "insufficient_balance"

    def __init__(self, message: str, fee_per_person: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.fee_per_person = fee_per_person


class UnauthorizedError(ParticipationError):
    """The access token was rejected; recoverable through token renewal."""

    kind = "unauthorized"

    def __init__(self, message: str, **kwargs):
        super().__init__(message, **kwargs)
        self.recoverable = True


class UnclassifiedError(ParticipationError):
    """The server reported a condition with no defined user-facing handling."""

    kind = "unclassified"


class NetworkFailureError(ParticipationError):
    """The participation request never produced an HTTP response."""

    kind = "network_failure"

    def __init__(self, message: str, **kwargs):
        super().__init__(message, **kwargs)
        self.recoverable = True
