"""
UI collaborator contracts used by the participation flow.
"""

from .protocols import ChallengePage, Navigator, Notifier
from .toast import Toast, ToastTimer

__all__ = ["ChallengePage", "Navigator", "Notifier", "Toast", "ToastTimer"]
