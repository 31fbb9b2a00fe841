"""Participation request and outcome models."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class OutcomeKind(str, Enum):
    """Closed set of results of one participation attempt."""
    SUCCESS = "success"
    DECLINED = "declined"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    INSUFFICIENT_BALANCE = "insufficient_balance"
    UNAUTHORIZED = "unauthorized"
    UNCLASSIFIED = "unclassified"
    NETWORK_FAILURE = "network_failure"


@dataclass(frozen=True)
class ParticipationRequest:
    """Outbound join mutation; lives only for one submission."""
    challenge_id: int
    access_token: str

    def __repr__(self) -> str:
        return f"ParticipationRequest(challenge_id={self.challenge_id})"


@dataclass(frozen=True)
class ParticipationOutcome:
    """Tagged result of one ParticipationRequest."""
    kind: OutcomeKind
    detail: Optional[str] = None
    status: Optional[int] = None

    @property
    def succeeded(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS

    @classmethod
    def success(cls) -> "ParticipationOutcome":
        return cls(kind=OutcomeKind.SUCCESS)

    @classmethod
    def declined(cls) -> "ParticipationOutcome":
        return cls(kind=OutcomeKind.DECLINED)

    @classmethod
    def failure(cls, kind: OutcomeKind, detail: Optional[str] = None,
                status: Optional[int] = None) -> "ParticipationOutcome":
        if kind in (OutcomeKind.SUCCESS, OutcomeKind.DECLINED):
            raise ValueError(f"{kind.value} is not a failure kind")
        return cls(kind=kind, detail=detail, status=status)
