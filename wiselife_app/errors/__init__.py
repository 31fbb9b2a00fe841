"""
Error classification system for the participation flow.

This module provides a structured exception hierarchy for the conditions the
server reports when a user tries to join a challenge, for credential renewal,
and for the HTTP boundary that produces them.
"""

from .participation import (
    ParticipationError,
    CapacityExceededError,
    InsufficientBalanceError,
    UnauthorizedError,
    UnclassifiedError,
    NetworkFailureError,
)
from .session import (
    SessionError,
    RenewalFailure,
    RenewalFailureReason,
    NotAuthenticatedError,
)
from .system_failures import (
    SystemFailureError,
    ApiError,
    ApiResponseError,
    ApiTransportError,
    ConfigurationError,
    StorageError,
    MalformedChallengeError,
)

__all__ = [
    # Participation
    "ParticipationError",
    "CapacityExceededError",
    "InsufficientBalanceError",
    "UnauthorizedError",
    "UnclassifiedError",
    "NetworkFailureError",
    # Session
    "SessionError",
    "RenewalFailure",
    "RenewalFailureReason",
    "NotAuthenticatedError",
    # System Failures
    "SystemFailureError",
    "ApiError",
    "ApiResponseError",
    "ApiTransportError",
    "ConfigurationError",
    "StorageError",
    "MalformedChallengeError",
]
