"""
Session credential management.
"""

from .store import RenewalResult, RenewalStatus, SessionTokenStore

__all__ = ["RenewalResult", "RenewalStatus", "SessionTokenStore"]
