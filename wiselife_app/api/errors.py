"""Parsing of the server's JSON error envelope."""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

UNAUTHENTICATED_STATUS = 401


class ServerMessage(str, Enum):
    """Error messages the participation endpoint is known to return."""
    MAX_MEMBER = "This challenge has max member"
    CHARGE_MONEY = "You need to charge money"
    OTHER = "other"

    @classmethod
    def from_raw(cls, raw: Optional[str]) -> "ServerMessage":
        for member in (cls.MAX_MEMBER, cls.CHARGE_MONEY):
            if raw == member.value:
                return member
        return cls.OTHER


@dataclass(frozen=True)
class ServerError:
    """Decoded ``{"error": {"message": ...}, "status": ...}`` body."""
    status: int
    message: ServerMessage
    raw_message: Optional[str] = None

    @property
    def is_unauthenticated(self) -> bool:
        return self.status == UNAUTHENTICATED_STATUS


def parse_error_body(body: Union[bytes, str, None], http_status: int) -> ServerError:
    """
    Decode an error response body.

    The ``status`` field inside the body takes precedence over the HTTP
    status line; a body that is not the expected envelope still yields a
    ServerError carrying the HTTP status and ``ServerMessage.OTHER``.
    """
    payload: Any = None
    if body:
        if isinstance(body, bytes):
            body = body.decode("utf-8", errors="replace")
        try:
            payload = json.loads(body)
        except ValueError:
            payload = None

    if not isinstance(payload, dict):
        return ServerError(status=http_status, message=ServerMessage.OTHER)

    status = payload.get("status")
    if isinstance(status, bool) or not isinstance(status, int):
        status = http_status

    raw_message = None
    error = payload.get("error")
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        raw_message = error["message"]

    return ServerError(
        status=status,
        message=ServerMessage.from_raw(raw_message),
        raw_message=raw_message,
    )
