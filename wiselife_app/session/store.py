"""
Session token store.

Holds the access/refresh credential pair for the whole process and is the
only writer of it. Renewal is reactive: the participation controller calls
``renew()`` after the server rejects an access token; the store never
schedules a renewal itself.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..api.client import ChallengeApiClient
from ..config.defaults import StorageParams
from ..errors import (
    ApiResponseError,
    ApiTransportError,
    RenewalFailure,
    RenewalFailureReason,
    StorageError,
)
from ..logging.config import get_session_logger, log_token_renewal
from ..models.credentials import Credentials
from ..persistence.local_storage import LocalStorage

logger = get_session_logger(__name__)


class RenewalStatus(Enum):
    """Token renewal status."""
    RENEWED = "renewed"
    FAILED = "failed"


@dataclass(frozen=True)
class RenewalResult:
    """Result of one renewal attempt."""
    status: RenewalStatus
    access_token: Optional[str] = None
    failure: Optional[RenewalFailure] = None

    @property
    def renewed(self) -> bool:
        return self.status is RenewalStatus.RENEWED

    def __repr__(self) -> str:
        reason = self.failure.reason.value if self.failure else None
        return f"RenewalResult(status={self.status.value}, reason={reason})"


class SessionTokenStore:
    """Single writer of the process-wide Credentials pair."""

    def __init__(
        self,
        api: ChallengeApiClient,
        storage: LocalStorage,
        params: Optional[StorageParams] = None,
    ):
        self.api = api
        self.storage = storage
        self.params = params or StorageParams()
        self.logger = logger
        self._credentials = Credentials()
        self.load()

    @property
    def credentials(self) -> Credentials:
        """Current snapshot; Credentials is immutable, so readers never see a half update."""
        return self._credentials

    def load(self) -> Credentials:
        """Populate the in-memory pair from durable storage."""
        self._credentials = Credentials(
            access_token=self.storage.get_item(self.params.access_token_key),
            refresh_token=self.storage.get_item(self.params.refresh_token_key),
        )
        self.logger.debug(
            "Credentials loaded",
            authenticated=self._credentials.is_authenticated,
            can_renew=self._credentials.can_renew
        )
        return self._credentials

    def save_login(self, access_token: str, refresh_token: str) -> Credentials:
        """
        Store the pair issued at login.

        A refresh token is required: it must outlive the access token it is
        paired with, so an access token is never stored without one.
        """
        if not access_token or not refresh_token:
            raise ValueError("Both access_token and refresh_token are required at login")

        self.storage.set_items({
            self.params.access_token_key: access_token,
            self.params.refresh_token_key: refresh_token,
        })
        self._credentials = Credentials(access_token=access_token, refresh_token=refresh_token)
        self.logger.info("Login credentials stored")
        return self._credentials

    def clear(self) -> None:
        """Forget both credentials (explicit logout only; renewal failures never call this)."""
        self.storage.remove_items([
            self.params.access_token_key,
            self.params.refresh_token_key,
            self.params.diagnostic_key,
        ])
        self._credentials = Credentials()
        self.logger.info("Credentials cleared")

    def renew(self) -> RenewalResult:
        """
        Exchange the refresh token for a new access token.

        On success the new token replaces the stored access token and is
        mirrored into the diagnostic slot in the same storage transaction.
        On any failure the existing credentials are left untouched and the
        failure is returned, not raised.
        """
        refresh_token = self._credentials.refresh_token
        if not refresh_token:
            return self._failed(RenewalFailure(
                "No refresh token available",
                reason=RenewalFailureReason.NO_REFRESH_TOKEN
            ))

        try:
            access_token = self.api.refresh_access_token(refresh_token)
        except ApiResponseError as e:
            return self._failed(RenewalFailure(
                f"Refresh token rejected: {e}",
                reason=RenewalFailureReason.REJECTED,
                status=e.status
            ))
        except ApiTransportError as e:
            return self._failed(RenewalFailure(
                f"Renewal request failed: {e}",
                reason=RenewalFailureReason.NETWORK
            ))

        if not access_token:
            return self._failed(RenewalFailure(
                "Renewal response carried no authorization header",
                reason=RenewalFailureReason.MISSING_HEADER
            ))

        try:
            self.storage.set_items({
                self.params.access_token_key: access_token,
                self.params.diagnostic_key: access_token,
            })
        except StorageError as e:
            return self._failed(RenewalFailure(
                f"Could not persist renewed token: {e}",
                reason=RenewalFailureReason.STORAGE
            ))

        self._credentials = self._credentials.with_access_token(access_token)
        log_token_renewal(self.logger, renewed=True, access_token=access_token)
        return RenewalResult(status=RenewalStatus.RENEWED, access_token=access_token)

    def _failed(self, failure: RenewalFailure) -> RenewalResult:
        log_token_renewal(self.logger, renewed=False, reason=failure.reason.value)
        return RenewalResult(status=RenewalStatus.FAILED, failure=failure)
