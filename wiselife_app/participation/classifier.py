"""
Failure classification for participation attempts.

Free and paid challenges are classified by separate functions. Only the
paid classifier knows about the top-up condition; a free challenge can
never be classified as InsufficientBalance, whatever the server says.
The unauthenticated status is checked first and independently of the
message, so a 401 always leads to token renewal.
"""

from ..api.errors import ServerError, ServerMessage
from ..errors import (
    CapacityExceededError,
    InsufficientBalanceError,
    ParticipationError,
    UnauthorizedError,
    UnclassifiedError,
)
from ..models.challenge import Challenge


def classify_free_failure(challenge: Challenge, server_error: ServerError) -> ParticipationError:
    """Classify a rejected join of a challenge with no fee."""
    common = {"challenge_id": challenge.id, "status": server_error.status}

    if server_error.is_unauthenticated:
        return UnauthorizedError(server_error.raw_message or "unauthenticated", **common)

    if server_error.message is ServerMessage.MAX_MEMBER:
        return CapacityExceededError(server_error.raw_message, **common)

    return UnclassifiedError(server_error.raw_message or "unrecognized error", **common)


def classify_paid_failure(challenge: Challenge, server_error: ServerError) -> ParticipationError:
    """Classify a rejected join of a challenge with a per-person fee."""
    common = {"challenge_id": challenge.id, "status": server_error.status}

    if server_error.is_unauthenticated:
        return UnauthorizedError(server_error.raw_message or "unauthenticated", **common)

    if server_error.message is ServerMessage.MAX_MEMBER:
        return CapacityExceededError(server_error.raw_message, **common)

    if server_error.message is ServerMessage.CHARGE_MONEY:
        return InsufficientBalanceError(
            server_error.raw_message,
            fee_per_person=challenge.fee_per_person,
            **common
        )

    return UnclassifiedError(server_error.raw_message or "unrecognized error", **common)


def classify_failure(challenge: Challenge, server_error: ServerError) -> ParticipationError:
    """Dispatch on the challenge fee to the matching classifier."""
    if challenge.is_free:
        return classify_free_failure(challenge, server_error)
    return classify_paid_failure(challenge, server_error)
