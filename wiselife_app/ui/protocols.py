"""Base classes for the UI collaborators the participation controller drives."""

from abc import ABC, abstractmethod
from typing import Optional

from .toast import Toast


class Notifier(ABC):
    """Dialogs and transient notifications."""

    @abstractmethod
    def confirm(self, title: str, text: str, confirm_label: str, cancel_label: str) -> bool:
        """
        Show a blocking confirmation prompt.

        Returns:
            True if the user accepted, False if they declined
        """
        pass

    @abstractmethod
    def toast(self, toast: Toast) -> None:
        """Show an auto-dismissing success notification."""
        pass

    @abstractmethod
    def info(self, title: str, text: Optional[str] = None) -> None:
        """Show a blocking informational dialog."""
        pass


class Navigator(ABC):
    """Route changes requested by the participation flow."""

    @abstractmethod
    def navigate(self, route: str) -> None:
        pass


class ChallengePage(ABC):
    """The page that owns the challenge data being joined."""

    @property
    def is_active(self) -> bool:
        """False once the user has navigated away; UI feedback is then skipped."""
        return True

    @abstractmethod
    def refresh(self) -> None:
        """Re-fetch challenge state so a successful join is reflected."""
        pass
