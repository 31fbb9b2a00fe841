"""
Client coordinator.

Builds the configuration, API client, local storage and session token
store once per process, and hands out a participation controller for each
challenge page that is opened.
"""

from pathlib import Path
from typing import Any, Optional, Union

import structlog

from .api.client import ChallengeApiClient
from .config.loader import ConfigLoader
from .models.challenge import Challenge
from .participation.controller import ParticipationController
from .participation.eligibility import is_join_open
from .persistence.local_storage import LocalStorage
from .session.store import SessionTokenStore
from .ui.console import ApiChallengePage
from .ui.protocols import ChallengePage, Navigator, Notifier

logger = structlog.get_logger(__name__)


class WiseLifeClient:
    """Process-wide wiring of the participation core."""

    def __init__(
        self,
        config_dir: Optional[Union[str, Path]] = None,
        overrides: Optional[dict[str, Any]] = None,
        storage: Optional[LocalStorage] = None,
    ) -> None:
        self.config = ConfigLoader.create(
            Path(config_dir) if config_dir is not None else None
        ).build_config(overrides)

        self.api = ChallengeApiClient(self.config.api)
        self.storage = storage or LocalStorage(self.config.storage.db_path)
        self.session = SessionTokenStore(self.api, self.storage, self.config.storage)

        logger.info(
            "WiseLife client initialized",
            base_url=self.config.api.base_url,
            authenticated=self.session.credentials.is_authenticated
        )

    def open_challenge(self, challenge_id: int) -> ApiChallengePage:
        """Fetch a challenge and return a page object that can refresh it."""
        challenge = self.api.get_challenge(challenge_id, self.session.credentials.access_token)
        return ApiChallengePage(self.api, self.session, challenge)

    def can_join(self, challenge: Challenge) -> bool:
        """Whether the join action should be offered for this challenge now."""
        return is_join_open(
            challenge,
            self.session.credentials,
            grace_days=self.config.eligibility.join_grace_days,
        )

    def participation_controller(
        self,
        page: ChallengePage,
        notifier: Notifier,
        navigator: Navigator,
    ) -> ParticipationController:
        return ParticipationController(
            api=self.api,
            session=self.session,
            notifier=notifier,
            navigator=navigator,
            page=page,
            config=self.config,
        )
