"""
Centralized logging configuration for the WiseLife client.

This module provides standardized logging configuration using structlog
for all components. Participation attempts and token renewals are logged
through the helpers below so every record carries the same keys.
"""
import hashlib
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_participation_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for participation attempts.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for the participation flow
    """
    return get_logger(name).bind(
        subsystem="participation",
        audit_trail=True
    )


def get_session_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for credential handling.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for the session token store
    """
    return get_logger(name).bind(
        subsystem="session",
        audit_trail=True
    )


def redact_token(token: Optional[str]) -> Optional[str]:
    """Return a short fingerprint of a credential, never the credential itself."""
    if not token:
        return None
    digest = hashlib.sha256(token.encode("utf-8")).hexdigest()
    return f"sha256:{digest[:12]}"


def log_participation_outcome(
    logger: FilteringBoundLogger,
    challenge_id: int,
    outcome: str,
    detail: Optional[str] = None,
    status: Optional[int] = None,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of one participation attempt with standardized format.

    Args:
        logger: Structlog logger instance
        challenge_id: ID of the challenge the user tried to join
        outcome: Outcome kind value
        detail: Server message or transport error text
        status: Server-reported status code, if any
        context: Additional context data
    """
    bound_logger = logger.bind(
        challenge_id=challenge_id,
        outcome=outcome,
        detail=detail,
        status=status,
        record="participation_outcome"
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if outcome in ("success", "declined"):
        bound_logger.info("Participation attempt finished")
    else:
        bound_logger.warning("Participation attempt failed")


def log_token_renewal(
    logger: FilteringBoundLogger,
    renewed: bool,
    reason: Optional[str] = None,
    access_token: Optional[str] = None
) -> None:
    """
    Log a token renewal with standardized format.

    Args:
        logger: Structlog logger instance
        renewed: Whether a new access token was stored
        reason: Failure reason when the renewal did not succeed
        access_token: New access token (only its fingerprint is logged)
    """
    bound_logger = logger.bind(
        renewal_result="RENEWED" if renewed else "FAILED",
        reason=reason,
        token_fingerprint=redact_token(access_token),
        record="token_renewal"
    )

    if renewed:
        bound_logger.info("Access token renewed")
    else:
        bound_logger.warning("Access token renewal failed")
