"""
End-to-end participation scenarios.

The real API client, local storage and session store are wired together;
only urllib.request.urlopen is replaced.
"""

import json
from unittest import mock

import pytest

from wiselife_app.app import WiseLifeClient
from wiselife_app.models.challenge import Challenge
from wiselife_app.models.participation import OutcomeKind

BASE_URL = "https://api.wiselife.test"


class FakeServer:
    """Routes urlopen calls to canned responses and records them."""

    def __init__(self, dummy_response, http_error):
        self.dummy_response = dummy_response
        self.http_error = http_error
        self.calls: list[tuple[str, str, dict]] = []
        self.participate_status = 200
        self.participate_body: dict = {}
        self.token_header = "access-2"

    def urlopen(self, request, timeout=None):
        path = request.full_url[len(BASE_URL):]
        self.calls.append((request.get_method(), path, dict(request.header_items())))

        if path.startswith("/challenges/participate/"):
            if self.participate_status >= 400:
                raise self.http_error(request.full_url, self.participate_status, self.participate_body)
            return self.dummy_response(b"", status=self.participate_status)

        if path == "/token":
            return self.dummy_response(b"", headers={"Authorization": self.token_header})

        raise AssertionError(f"unexpected request {request.get_method()} {path}")

    def requests(self, method: str, path: str) -> list:
        return [c for c in self.calls if c[0] == method and c[1] == path]


@pytest.fixture
def server(dummy_response, http_error) -> FakeServer:
    return FakeServer(dummy_response, http_error)


@pytest.fixture
def client(tmp_path, storage) -> WiseLifeClient:
    client = WiseLifeClient(
        config_dir=tmp_path,
        overrides={"api": {"base_url": BASE_URL}},
        storage=storage,
    )
    client.session.save_login("access-1", "refresh-1")
    return client


def attempt(client, server, challenge, notifier, navigator, page):
    controller = client.participation_controller(page=page, notifier=notifier, navigator=navigator)
    with mock.patch("urllib.request.urlopen", server.urlopen):
        return controller.attempt_participation(challenge)


class TestScenarios:
    """Participation scenarios against a fake server."""

    def test_free_challenge_success(self, client, server, free_challenge, notifier, navigator, page):
        outcome = attempt(client, server, free_challenge, notifier, navigator, page)

        assert outcome.kind is OutcomeKind.SUCCESS
        calls = server.requests("POST", "/challenges/participate/7")
        assert len(calls) == 1
        assert calls[0][2]["Authorization"] == "access-1"
        assert len(notifier.toasts) == 1
        assert "10k Steps" in notifier.toasts[0].text
        assert page.refresh_count == 1
        assert navigator.routes == []

    def test_expired_token_renews(self, client, server, storage, free_challenge,
                                  notifier, navigator, page):
        server.participate_status = 401
        server.participate_body = {"status": 401, "error": {"message": "token expired"}}

        outcome = attempt(client, server, free_challenge, notifier, navigator, page)

        assert outcome.kind is OutcomeKind.UNAUTHORIZED
        token_calls = server.requests("GET", "/token")
        assert len(token_calls) == 1
        assert token_calls[0][2]["Refresh"] == "refresh-1"
        assert notifier.infos == []
        assert client.session.credentials.access_token == "access-2"
        assert storage.get_item("authorizationToken") == "access-2"
        assert storage.get_item("test") == "access-2"
        assert len(server.requests("POST", "/challenges/participate/7")) == 1

    def test_paid_challenge_top_up(self, client, server, notifier, navigator, page):
        challenge = Challenge.from_payload({
            "challengeId": 7,
            "challengeTitle": "10k Steps",
            "challengeFeePerPerson": 5000,
            "challengeStartDate": "2026-11-02",
        })
        server.participate_status = 400
        server.participate_body = {"status": 400, "error": {"message": "You need to charge money"}}

        outcome = attempt(client, server, challenge, notifier, navigator, page)

        assert outcome.kind is OutcomeKind.INSUFFICIENT_BALANCE
        assert len(notifier.infos) == 1
        assert navigator.routes == ["/ordersheet"]
        assert server.requests("GET", "/token") == []

    def test_decline_sends_nothing(self, client, server, free_challenge, notifier, navigator, page):
        notifier.accept = False

        outcome = attempt(client, server, free_challenge, notifier, navigator, page)

        assert outcome.kind is OutcomeKind.DECLINED
        assert server.calls == []


class TestClientWiring:
    """Test the coordinator."""

    def test_can_join_requires_login(self, tmp_path, storage, free_challenge):
        client = WiseLifeClient(config_dir=tmp_path, storage=storage)
        assert client.can_join(free_challenge) is False

    def test_open_challenge(self, client, dummy_response, challenge_payload):
        response = dummy_response(json.dumps(challenge_payload).encode("utf-8"))
        with mock.patch("urllib.request.urlopen", return_value=response):
            page = client.open_challenge(7)

        assert page.challenge.title == "10k Steps"
        assert page.is_active is True
