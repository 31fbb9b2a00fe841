"""Pytest configuration and shared fixtures."""

import io
import json
import urllib.error
from datetime import date
from email.message import Message
from typing import Any, Optional

import pytest

from wiselife_app.api.client import ChallengeApiClient
from wiselife_app.config.defaults import ApiParams
from wiselife_app.models.challenge import Challenge
from wiselife_app.persistence.local_storage import LocalStorage
from wiselife_app.ui.protocols import ChallengePage, Navigator, Notifier

BASE_URL = "https://api.wiselife.test"


class DummyResponse:
    """Stand-in for the object urllib.request.urlopen returns."""

    def __init__(self, payload: bytes = b"", status: int = 200,
                 headers: Optional[dict[str, str]] = None):
        self._payload = payload
        self.status = status
        self.headers = Message()
        for key, value in (headers or {}).items():
            self.headers[key] = value

    def getcode(self) -> int:
        return self.status

    def read(self) -> bytes:
        return self._payload

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False


def make_http_error(url: str, code: int, body: Any) -> urllib.error.HTTPError:
    """Build the HTTPError urlopen raises for a non-2xx response."""
    raw = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
    return urllib.error.HTTPError(url, code, "error", Message(), io.BytesIO(raw))


class RecordingNotifier(Notifier):
    """Notifier that answers the prompt with a preset choice and records every call."""

    def __init__(self, accept: bool = True):
        self.accept = accept
        self.confirms: list[dict[str, str]] = []
        self.toasts: list = []
        self.infos: list[tuple[str, Optional[str]]] = []

    def confirm(self, title: str, text: str, confirm_label: str, cancel_label: str) -> bool:
        self.confirms.append({
            "title": title,
            "text": text,
            "confirm_label": confirm_label,
            "cancel_label": cancel_label,
        })
        return self.accept

    def toast(self, toast) -> None:
        self.toasts.append(toast)

    def info(self, title: str, text: Optional[str] = None) -> None:
        self.infos.append((title, text))


class RecordingNavigator(Navigator):
    def __init__(self):
        self.routes: list[str] = []

    def navigate(self, route: str) -> None:
        self.routes.append(route)


class RecordingPage(ChallengePage):
    def __init__(self, active: bool = True):
        self.active = active
        self.refresh_count = 0

    @property
    def is_active(self) -> bool:
        return self.active

    def refresh(self) -> None:
        self.refresh_count += 1


@pytest.fixture
def free_challenge() -> Challenge:
    """Zero-fee challenge used by the participation scenarios."""
    return Challenge(
        id=7,
        title="10k Steps",
        fee_per_person=0,
        start_date=date(2026, 11, 2),
        end_date=date(2026, 11, 30),
        min_party=2,
        max_party=10,
        current_party=4,
    )


@pytest.fixture
def paid_challenge() -> Challenge:
    """Challenge with a per-person fee."""
    return Challenge(
        id=12,
        title="Morning Run",
        fee_per_person=5000,
        start_date=date(2026, 11, 2),
        max_party=5,
        current_party=5,
    )


@pytest.fixture
def challenge_payload() -> dict[str, Any]:
    """Challenge detail payload as the server sends it."""
    return {
        "challengeId": 7,
        "challengeTitle": "10k Steps",
        "challengeViewCount": 42,
        "challengeRepImagePath": "https://img.test/rep.png",
        "challengeMinParty": 2,
        "challengeMaxParty": 10,
        "challengeCurrentParty": 5,
        "challengeStartDate": "2026-11-02",
        "challengeEndDate": "2026-11-30",
        "challengeFeePerPerson": 0,
        "challengeAuthAvailableTime": ["07:00", "21:00"],
        "challengeDescription": "Walk ten thousand steps a day.",
        "challengeAuthDescription": "Upload a screenshot of your step counter.",
        "challengeExamImagePath": ["https://img.test/exam1.png"],
        "challengeReviews": [
            {"challengeReviewImagePath": "https://img.test/review1.png"},
            {"challengeReviewImagePath": "https://img.test/review2.png"},
        ],
    }


@pytest.fixture
def api_params() -> ApiParams:
    return ApiParams(base_url=BASE_URL, timeout_seconds=5)


@pytest.fixture
def api_client(api_params: ApiParams) -> ChallengeApiClient:
    return ChallengeApiClient(api_params)


@pytest.fixture
def storage():
    """In-memory local storage."""
    store = LocalStorage(":memory:")
    yield store
    store.close()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier(accept=True)


@pytest.fixture
def navigator() -> RecordingNavigator:
    return RecordingNavigator()


@pytest.fixture
def page() -> RecordingPage:
    return RecordingPage()


@pytest.fixture
def dummy_response():
    """Factory for fake urlopen responses."""
    return DummyResponse


@pytest.fixture
def http_error():
    """Factory for the HTTPError urlopen raises."""
    return make_http_error
