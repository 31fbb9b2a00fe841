"""Session credential pair."""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class Credentials:
    """Access and refresh token pair held by the session token store."""

    access_token: Optional[str] = None
    refresh_token: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        """An anonymous session has no access token."""
        return bool(self.access_token)

    @property
    def can_renew(self) -> bool:
        return bool(self.refresh_token)

    def with_access_token(self, access_token: str) -> "Credentials":
        """Return a copy carrying a renewed access token."""
        return replace(self, access_token=access_token)

    def __repr__(self) -> str:
        # Tokens stay out of reprs so they cannot leak into logs or tracebacks.
        return (
            f"Credentials(access_token={'<set>' if self.access_token else None}, "
            f"refresh_token={'<set>' if self.refresh_token else None})"
        )
