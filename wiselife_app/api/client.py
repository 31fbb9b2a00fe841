"""HTTP client for the WiseLife challenge endpoints."""

import json
import socket
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, Optional

import structlog

from ..config.defaults import ApiParams
from ..errors import ApiResponseError, ApiTransportError, MalformedChallengeError
from ..models.challenge import Challenge
from .errors import parse_error_body

logger = structlog.get_logger(__name__)

PARTICIPATE_PATH = "/challenges/participate/{challenge_id}"
TOKEN_PATH = "/token"
CHALLENGE_PATH = "/challenges/{challenge_id}"


def _header(headers: Any, name: str) -> Optional[str]:
    """Case-insensitive header lookup."""
    if headers is None:
        return None
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


class ChallengeApiClient:
    """Thin urllib client for participation, token renewal and challenge detail."""

    def __init__(self, params: Optional[ApiParams] = None):
        self.params = params or ApiParams()
        self.logger = logger.bind(base_url=self.params.base_url)

        parsed = urllib.parse.urlparse(self.params.base_url)
        if not parsed.scheme or not parsed.netloc:
            raise ApiTransportError(f"Invalid base URL: {self.params.base_url}")

    def _build_url(self, path: str) -> str:
        return f"{self.params.base_url.rstrip('/')}{path}"

    def _base_headers(self) -> dict[str, str]:
        return {
            self.params.bypass_header: self.params.bypass_value,
            "User-Agent": self.params.user_agent,
        }

    def _send(self, request: urllib.request.Request) -> tuple[int, Any, bytes]:
        """Send a request; return (status, headers, body) or raise an ApiError."""
        method = request.get_method()
        url = request.full_url
        try:
            with urllib.request.urlopen(request, timeout=self.params.timeout_seconds) as response:
                status = response.getcode() if hasattr(response, "getcode") else 200
                return status, response.headers, response.read()

        except urllib.error.HTTPError as e:
            body = e.read() if e.fp is not None else b""
            server_error = parse_error_body(body, e.code)
            self.logger.warning(
                "API request rejected",
                method=method,
                path=urllib.parse.urlparse(url).path,
                http_status=e.code,
                server_status=server_error.status,
                server_message=server_error.raw_message
            )
            raise ApiResponseError(
                f"HTTP {e.code}: {server_error.raw_message or e.reason}",
                status=e.code,
                server_error=server_error,
                method=method,
                url=url
            ) from e

        except (urllib.error.URLError, socket.timeout, OSError) as e:
            self.logger.warning(
                "API request network error",
                method=method,
                path=urllib.parse.urlparse(url).path,
                error=str(e)
            )
            raise ApiTransportError(
                f"Network error: {e}",
                method=method,
                url=url
            ) from e

    def _ensure_success(self, request: urllib.request.Request, status: int, body: bytes) -> None:
        # urlopen follows redirects and raises for 4xx/5xx; anything else non-2xx lands here.
        if 200 <= status < 300:
            return
        server_error = parse_error_body(body, status)
        raise ApiResponseError(
            f"HTTP {status}: {server_error.raw_message or 'unexpected status'}",
            status=status,
            server_error=server_error,
            method=request.get_method(),
            url=request.full_url
        )

    def participate(self, challenge_id: int, access_token: str) -> None:
        """
        Ask the server to add the current user to a challenge.

        Args:
            challenge_id: Challenge to join
            access_token: Current access credential, sent verbatim as Authorization

        Raises:
            ApiResponseError: Server answered with a non-2xx status
            ApiTransportError: No HTTP response was received
        """
        data = json.dumps({"data": ""}).encode("utf-8")
        headers = self._base_headers()
        headers.update({
            "Content-Type": "application/json",
            "Authorization": access_token,
        })
        request = urllib.request.Request(
            self._build_url(PARTICIPATE_PATH.format(challenge_id=challenge_id)),
            data=data,
            headers=headers,
            method="POST"
        )

        status, _headers, body = self._send(request)
        self._ensure_success(request, status, body)

        self.logger.info(
            "Participation request accepted",
            challenge_id=challenge_id,
            http_status=status
        )

    def refresh_access_token(self, refresh_token: str) -> Optional[str]:
        """
        Exchange the refresh credential for a new access credential.

        The new token is taken from the ``authorization`` response header only;
        the body is ignored. Returns None when the header is absent.
        """
        headers = self._base_headers()
        headers["refresh"] = refresh_token
        request = urllib.request.Request(
            self._build_url(TOKEN_PATH),
            headers=headers,
            method="GET"
        )

        status, response_headers, body = self._send(request)
        self._ensure_success(request, status, body)

        return _header(response_headers, "authorization") or None

    def get_challenge(self, challenge_id: int, access_token: Optional[str] = None) -> Challenge:
        """Fetch challenge detail data."""
        headers = self._base_headers()
        if access_token:
            headers["Authorization"] = access_token
        request = urllib.request.Request(
            self._build_url(CHALLENGE_PATH.format(challenge_id=challenge_id)),
            headers=headers,
            method="GET"
        )

        status, _headers, body = self._send(request)
        self._ensure_success(request, status, body)

        try:
            payload = json.loads(body.decode("utf-8")) if body else None
        except ValueError as e:
            raise MalformedChallengeError(
                "Challenge response is not valid JSON",
                raw_value=body[:200]
            ) from e

        return Challenge.from_payload(payload)
