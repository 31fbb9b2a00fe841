"""Default configuration parameters for the challenge participation client."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ApiParams:
    """WiseLife API connection parameters."""
    base_url: str = "http://localhost:8080"
    bypass_header: str = "ngrok-skip-browser-warning"   # Tunnel interstitial bypass marker
    bypass_value: str = "none"
    timeout_seconds: int = 30
    user_agent: str = "wiselife-app/0.1"


@dataclass(frozen=True)
class StorageParams:
    """Durable local storage slots."""
    db_path: str = "wiselife_storage.db"
    access_token_key: str = "authorizationToken"
    refresh_token_key: str = "refreshToken"
    diagnostic_key: str = "test"                       # Legacy mirror of the access token
    challenge_id_key: str = "challengeId"             # Read by the order sheet page


@dataclass(frozen=True)
class NotificationParams:
    """Transient notification behaviour."""
    toast_duration_ms: int = 3000
    toast_pause_on_hover: bool = True


@dataclass(frozen=True)
class RouteParams:
    """Navigation targets used by the participation flow."""
    top_up: str = "/ordersheet"


@dataclass(frozen=True)
class EligibilityParams:
    """Join window parameters."""
    join_grace_days: int = 1                          # Joins allowed until start date + N days


@dataclass(frozen=True)
class MessageParams:
    """User-facing dialog and toast text."""
    confirm_title: str = "Confirm"
    confirm_text: str = "Do you want to take on {title}?"
    confirm_button: str = "Challenge!"
    cancel_button: str = "Maybe later..."
    joined_toast: str = "You joined {title}."
    capacity_title: str = "This challenge is full."
    capacity_text: str = "Please try again next time."
    top_up_title: str = "Please top up your points."


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    api: ApiParams
    storage: StorageParams
    notifications: NotificationParams
    routes: RouteParams
    eligibility: EligibilityParams
    messages: MessageParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        api=ApiParams(),
        storage=StorageParams(),
        notifications=NotificationParams(),
        routes=RouteParams(),
        eligibility=EligibilityParams(),
        messages=MessageParams(),
    )
