"""
Participation controller.

Runs one join attempt end to end:
Confirmation → Participate request → Classification → Feedback / Navigation / Renewal

Caller contract: only one attempt may be outstanding per trigger. The UI
disables the join trigger until ``attempt_participation`` returns; the
controller itself does not deduplicate concurrent calls.
"""

from typing import Optional

from ..api.client import ChallengeApiClient
from ..api.errors import parse_error_body
from ..config.defaults import DefaultConfig, get_default_config
from ..errors import (
    ApiError,
    ApiResponseError,
    ApiTransportError,
    CapacityExceededError,
    InsufficientBalanceError,
    MalformedChallengeError,
    NetworkFailureError,
    NotAuthenticatedError,
    ParticipationError,
    StorageError,
    UnauthorizedError,
)
from ..logging.config import get_participation_logger, log_participation_outcome
from ..models.challenge import Challenge
from ..models.credentials import Credentials
from ..models.participation import OutcomeKind, ParticipationOutcome, ParticipationRequest
from ..session.store import SessionTokenStore
from ..ui.protocols import ChallengePage, Navigator, Notifier
from ..ui.toast import Toast
from .classifier import classify_failure

logger = get_participation_logger(__name__)


class ParticipationController:
    """Orchestrates the user-facing join flow for one challenge page."""

    def __init__(
        self,
        api: ChallengeApiClient,
        session: SessionTokenStore,
        notifier: Notifier,
        navigator: Navigator,
        page: ChallengePage,
        config: Optional[DefaultConfig] = None,
    ) -> None:
        self.api = api
        self.session = session
        self.notifier = notifier
        self.navigator = navigator
        self.page = page
        self.config = config or get_default_config()
        self.logger = logger

    def attempt_participation(
        self,
        challenge: Challenge,
        credentials: Optional[Credentials] = None,
    ) -> ParticipationOutcome:
        """
        Ask the user to confirm, then try to join ``challenge``.

        All results reach the user through the notifier, navigator and page
        collaborators; the returned outcome is informational. Server and
        transport failures are handled here and never raised to the caller.

        Args:
            challenge: Challenge being joined
            credentials: Credential snapshot; defaults to the session store's

        Raises:
            NotAuthenticatedError: No access token; the join action should not have been offered
        """
        if credentials is None:
            credentials = self.session.credentials
        if not credentials.is_authenticated:
            raise NotAuthenticatedError(
                "Participation requires an access token",
                context={"challenge_id": challenge.id}
            )

        messages = self.config.messages
        confirmed = self.notifier.confirm(
            title=messages.confirm_title,
            text=messages.confirm_text.format(title=challenge.title),
            confirm_label=messages.confirm_button,
            cancel_label=messages.cancel_button,
        )
        if not confirmed:
            outcome = ParticipationOutcome.declined()
            log_participation_outcome(self.logger, challenge.id, outcome.kind.value)
            return outcome

        self._remember_challenge(challenge)

        request = ParticipationRequest(challenge_id=challenge.id,
                                       access_token=credentials.access_token)
        try:
            self.api.participate(request.challenge_id, request.access_token)
        except ApiResponseError as e:
            server_error = e.server_error or parse_error_body(None, e.status)
            return self._handle_failure(challenge, classify_failure(challenge, server_error))
        except ApiTransportError as e:
            return self._handle_failure(challenge, NetworkFailureError(
                str(e), challenge_id=challenge.id
            ))

        return self._handle_success(challenge)

    def _remember_challenge(self, challenge: Challenge) -> None:
        """Record the challenge for the order sheet page reached via top-up."""
        try:
            self.session.storage.set_item(self.config.storage.challenge_id_key, str(challenge.id))
        except StorageError as e:
            self.logger.warning(
                "Could not record challenge id",
                challenge_id=challenge.id,
                error=str(e)
            )

    def _handle_success(self, challenge: Challenge) -> ParticipationOutcome:
        outcome = ParticipationOutcome.success()
        log_participation_outcome(self.logger, challenge.id, outcome.kind.value)

        if not self.page.is_active:
            self.logger.info("Page dismissed before success feedback", challenge_id=challenge.id)
            return outcome

        notifications = self.config.notifications
        self.notifier.toast(Toast(
            text=self.config.messages.joined_toast.format(title=challenge.title),
            duration_ms=notifications.toast_duration_ms,
            pause_on_hover=notifications.toast_pause_on_hover,
        ))

        try:
            self.page.refresh()
        except (ApiError, MalformedChallengeError) as e:
            self.logger.error(
                "Challenge refresh after join failed",
                challenge_id=challenge.id,
                error=str(e)
            )

        return outcome

    def _handle_failure(self, challenge: Challenge, error: ParticipationError) -> ParticipationOutcome:
        outcome = ParticipationOutcome.failure(
            OutcomeKind(error.kind),
            detail=str(error) or None,
            status=error.status,
        )
        log_participation_outcome(
            self.logger, challenge.id, outcome.kind.value,
            detail=outcome.detail, status=outcome.status
        )

        if isinstance(error, UnauthorizedError):
            # Credentials are process-wide, so renewal runs even if the page is gone.
            # The original request is not re-sent with the renewed token.
            self.session.renew()
            return outcome

        if not self.page.is_active:
            self.logger.info(
                "Page dismissed before failure feedback",
                challenge_id=challenge.id,
                outcome=outcome.kind.value
            )
            return outcome

        messages = self.config.messages
        if isinstance(error, CapacityExceededError):
            self.notifier.info(messages.capacity_title, messages.capacity_text)
        elif isinstance(error, InsufficientBalanceError):
            self.notifier.info(messages.top_up_title)
            self.navigator.navigate(self.config.routes.top_up)

        return outcome
