"""Tests for the terminal UI collaborators."""

import io
from unittest.mock import Mock

from wiselife_app.api.client import ChallengeApiClient
from wiselife_app.models.credentials import Credentials
from wiselife_app.session.store import SessionTokenStore
from wiselife_app.ui.console import ApiChallengePage, ConsoleNavigator, ConsoleNotifier
from wiselife_app.ui.toast import Toast


class TestConsoleNotifier:
    """Test ConsoleNotifier."""

    def test_confirm_accepts_yes(self):
        output = io.StringIO()
        notifier = ConsoleNotifier(input_func=lambda prompt: " Y ", output=output)

        assert notifier.confirm("Confirm", "Join 10k Steps?", "Challenge!", "Later") is True
        assert "Join 10k Steps?" in output.getvalue()

    def test_confirm_declines_anything_else(self):
        notifier = ConsoleNotifier(input_func=lambda prompt: "", output=io.StringIO())
        assert notifier.confirm("Confirm", "Join?", "Challenge!", "Later") is False

    def test_toast_and_info(self):
        output = io.StringIO()
        notifier = ConsoleNotifier(output=output)

        notifier.toast(Toast(text="You joined 10k Steps."))
        notifier.info("This challenge is full.", "Please try again next time.")

        lines = output.getvalue().splitlines()
        assert lines[0] == "[success] You joined 10k Steps."
        assert lines[1] == "[i] This challenge is full. Please try again next time."


class TestConsoleNavigator:
    def test_records_routes(self):
        navigator = ConsoleNavigator(output=io.StringIO())
        navigator.navigate("/ordersheet")
        assert navigator.history == ["/ordersheet"]


class TestApiChallengePage:
    """Test the API-backed page collaborator."""

    def test_refresh_refetches_challenge(self, free_challenge, paid_challenge):
        api = Mock(spec=ChallengeApiClient)
        api.get_challenge.return_value = paid_challenge
        session = Mock(spec=SessionTokenStore)
        session.credentials = Credentials("access-1", "refresh-1")

        page = ApiChallengePage(api, session, free_challenge)
        page.refresh()

        api.get_challenge.assert_called_once_with(7, "access-1")
        assert page.challenge is paid_challenge

    def test_dismiss(self, free_challenge):
        page = ApiChallengePage(Mock(spec=ChallengeApiClient), Mock(spec=SessionTokenStore),
                                free_challenge)
        assert page.is_active is True
        page.dismiss()
        assert page.is_active is False
