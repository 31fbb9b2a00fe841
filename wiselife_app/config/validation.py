"""Configuration validation utilities."""

from dataclasses import dataclass
from string import Formatter
from typing import Any
from urllib.parse import urlparse

KNOWN_SECTIONS = ("api", "storage", "notifications", "routes", "eligibility", "messages")

# Message templates formatted with the challenge title
TITLE_TEMPLATES = ("confirm_text", "joined_toast")
TITLE_PLACEHOLDER = {"title"}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_api_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate API connection parameters."""
        errors = []

        if "base_url" in params:
            value = params["base_url"]
            parsed = urlparse(value) if isinstance(value, str) else None
            if parsed is None or parsed.scheme not in ("http", "https") or not parsed.netloc:
                errors.append(ValidationError(
                    field="api.base_url",
                    message="Must be an absolute http(s) URL",
                    value=value
                ))

        if "timeout_seconds" in params:
            value = params["timeout_seconds"]
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                errors.append(ValidationError(
                    field="api.timeout_seconds",
                    message="Must be a positive number",
                    value=value
                ))

        for key in ("bypass_header", "user_agent"):
            if key in params:
                value = params[key]
                if not isinstance(value, str) or not value:
                    errors.append(ValidationError(
                        field=f"api.{key}",
                        message="Must be a non-empty string",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_storage_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate storage slot names."""
        errors = []

        for key, value in params.items():
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field=f"storage.{key}",
                    message="Must be a non-empty string",
                    value=value
                ))

        slot_keys = [params.get(k) for k in
                     ("access_token_key", "refresh_token_key", "diagnostic_key", "challenge_id_key")
                     if k in params]
        if len(set(slot_keys)) != len(slot_keys):
            errors.append(ValidationError(
                field="storage",
                message="Storage slot names must be distinct",
                value=slot_keys
            ))

        return errors

    @staticmethod
    def validate_notification_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate toast parameters."""
        errors = []

        if "toast_duration_ms" in params:
            value = params["toast_duration_ms"]
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                errors.append(ValidationError(
                    field="notifications.toast_duration_ms",
                    message="Must be a positive integer",
                    value=value
                ))

        if "toast_pause_on_hover" in params:
            value = params["toast_pause_on_hover"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="notifications.toast_pause_on_hover",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_route_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate navigation routes."""
        errors = []

        for key, value in params.items():
            if not isinstance(value, str) or not value.startswith("/"):
                errors.append(ValidationError(
                    field=f"routes.{key}",
                    message="Must be an absolute route starting with '/'",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_eligibility_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate join window parameters."""
        errors = []

        if "join_grace_days" in params:
            value = params["join_grace_days"]
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                errors.append(ValidationError(
                    field="eligibility.join_grace_days",
                    message="Must be a non-negative integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_message_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate user-facing dialog and toast text."""
        errors = []

        for key, value in params.items():
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field=f"messages.{key}",
                    message="Must be a non-empty string",
                    value=value
                ))
                continue

            if key not in TITLE_TEMPLATES:
                continue

            try:
                fields = {name for _, name, _, _ in Formatter().parse(value) if name is not None}
            except ValueError:
                errors.append(ValidationError(
                    field=f"messages.{key}",
                    message="Malformed format string",
                    value=value
                ))
                continue

            if not fields <= TITLE_PLACEHOLDER:
                errors.append(ValidationError(
                    field=f"messages.{key}",
                    message="Only the {title} placeholder is supported",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section, value in config.items():
            if section not in KNOWN_SECTIONS:
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=value
                ))
            elif not isinstance(value, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Section must be a mapping",
                    value=value
                ))

        def section(name: str) -> dict[str, Any]:
            value = config.get(name)
            return value if isinstance(value, dict) else {}

        errors.extend(ConfigValidator.validate_api_params(section("api")))
        errors.extend(ConfigValidator.validate_storage_params(section("storage")))
        errors.extend(ConfigValidator.validate_notification_params(section("notifications")))
        errors.extend(ConfigValidator.validate_route_params(section("routes")))
        errors.extend(ConfigValidator.validate_eligibility_params(section("eligibility")))
        errors.extend(ConfigValidator.validate_message_params(section("messages")))

        return errors
