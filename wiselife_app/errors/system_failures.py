"""
System failure error classifications.

These cover the HTTP boundary, local storage, configuration, and malformed
server payloads. They are raised by the lower layers and translated by the
participation controller and session store.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for failures below the participation flow."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class ApiError(SystemFailureError):
    """Base class for WiseLife API failures."""

    def __init__(self, message: str, method: Optional[str] = None,
                 url: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.method = method
        self.url = url


class ApiResponseError(ApiError):
    """The server answered with a non-2xx status."""

    def __init__(self, message: str, status: int, server_error: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.status = status
        self.server_error = server_error


class ApiTransportError(ApiError):
    """The request failed before any HTTP response was received."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, **kwargs)
        self.recoverable = True


class ConfigurationError(SystemFailureError):
    """Client configuration is invalid."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []


class StorageError(SystemFailureError):
    """Durable local storage read or write failed."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 key: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation
        self.key = key


class MalformedChallengeError(SystemFailureError):
    """Challenge payload from the server is missing or has invalid fields."""

    def __init__(self, message: str, field: Optional[str] = None,
                 raw_value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.raw_value = raw_value
