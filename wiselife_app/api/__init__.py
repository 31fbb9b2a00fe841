"""
WiseLife HTTP API boundary.

Raw server responses are converted here into typed values: a closed
enumeration of known error messages and typed exceptions for non-2xx and
transport failures.
"""

from .client import ChallengeApiClient
from .errors import ServerError, ServerMessage, parse_error_body

__all__ = ["ChallengeApiClient", "ServerError", "ServerMessage", "parse_error_body"]
