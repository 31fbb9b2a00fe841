"""
Session error classifications for credential handling.
"""

from enum import Enum
from typing import Optional, Dict, Any


class RenewalFailureReason(str, Enum):
    """Why an access token renewal did not produce a new token."""
    NO_REFRESH_TOKEN = "no_refresh_token"
    NETWORK = "network"
    REJECTED = "rejected"
    MISSING_HEADER = "missing_header"
    STORAGE = "storage"


class SessionError(Exception):
    """Base class for credential errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class RenewalFailure(SessionError):
    """Renewal failed; the stored credentials were left untouched."""

    def __init__(self, message: str, reason: RenewalFailureReason,
                 status: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.reason = reason
        self.status = status
        self.recoverable = False


class NotAuthenticatedError(SessionError):
    """An authenticated action was invoked without an access token."""
    pass
