"""Terminal implementations of the UI collaborators."""

import sys
from typing import Callable, Optional, TextIO

import structlog

from ..api.client import ChallengeApiClient
from ..models.challenge import Challenge
from ..session.store import SessionTokenStore
from .protocols import ChallengePage, Navigator, Notifier
from .toast import Toast

logger = structlog.get_logger(__name__)

ACCEPT_ANSWERS = ("y", "yes")


class ConsoleNotifier(Notifier):
    """Prompts on stdin and prints dialogs to stdout."""

    def __init__(self, input_func: Callable[[str], str] = input, output: Optional[TextIO] = None):
        self._input = input_func
        self._output = output or sys.stdout

    def confirm(self, title: str, text: str, confirm_label: str, cancel_label: str) -> bool:
        print(f"[?] {title}: {text}", file=self._output, flush=True)
        answer = self._input(f"    y = {confirm_label} / n = {cancel_label} > ")
        return answer.strip().lower() in ACCEPT_ANSWERS

    def toast(self, toast: Toast) -> None:
        # A terminal has no pointer to hover with, so the toast is printed once.
        print(f"[{toast.icon}] {toast.text}", file=self._output, flush=True)

    def info(self, title: str, text: Optional[str] = None) -> None:
        line = f"[i] {title}"
        if text:
            line += f" {text}"
        print(line, file=self._output, flush=True)


class ConsoleNavigator(Navigator):
    """Records requested routes and prints them."""

    def __init__(self, output: Optional[TextIO] = None):
        self._output = output or sys.stdout
        self.history: list[str] = []

    def navigate(self, route: str) -> None:
        self.history.append(route)
        print(f"-> {route}", file=self._output, flush=True)


class ApiChallengePage(ChallengePage):
    """Detail page state backed by the challenge endpoint."""

    def __init__(self, api: ChallengeApiClient, session: SessionTokenStore,
                 challenge: Challenge):
        self.api = api
        self.session = session
        self.challenge = challenge
        self._active = True

    @property
    def is_active(self) -> bool:
        return self._active

    def dismiss(self) -> None:
        self._active = False

    def refresh(self) -> None:
        self.challenge = self.api.get_challenge(
            self.challenge.id, self.session.credentials.access_token
        )
        logger.info(
            "Challenge detail refreshed",
            challenge_id=self.challenge.id,
            current_party=self.challenge.current_party,
            max_party=self.challenge.max_party
        )
