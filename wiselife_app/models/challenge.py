"""
Challenge detail model.

The participation core only reads ``id``, ``title``, ``fee_per_person`` and
``start_date``; the remaining fields are carried through for the detail page.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional

from ..errors import MalformedChallengeError


def _require(payload: dict[str, Any], key: str) -> Any:
    if key not in payload or payload[key] is None:
        raise MalformedChallengeError(f"Missing required field {key}", field=key)
    return payload[key]


def _parse_int(value: Any, key: str) -> int:
    if isinstance(value, bool):
        raise MalformedChallengeError(f"{key} must be an integer", field=key, raw_value=value)
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value.strip())
    raise MalformedChallengeError(f"{key} must be an integer", field=key, raw_value=value)


def _parse_date(value: Any, key: str) -> date:
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError as e:
        raise MalformedChallengeError(
            f"{key} must be an ISO date (YYYY-MM-DD)", field=key, raw_value=value
        ) from e


def _optional_int(payload: dict[str, Any], key: str) -> Optional[int]:
    value = payload.get(key)
    return None if value is None else _parse_int(value, key)


@dataclass(frozen=True)
class Challenge:
    """Read-only challenge data fetched by the detail page."""

    id: int
    title: str
    fee_per_person: int
    start_date: date
    end_date: Optional[date] = None
    min_party: Optional[int] = None
    max_party: Optional[int] = None
    current_party: Optional[int] = None
    view_count: int = 0
    description: str = ""
    auth_description: str = ""
    auth_available_times: tuple[str, ...] = ()
    rep_image_path: Optional[str] = None
    exam_image_paths: tuple[str, ...] = ()
    review_image_paths: tuple[str, ...] = field(default=(), repr=False)

    def __post_init__(self) -> None:
        if self.fee_per_person < 0:
            raise MalformedChallengeError(
                "challengeFeePerPerson must be non-negative",
                field="challengeFeePerPerson",
                raw_value=self.fee_per_person
            )

    @property
    def is_free(self) -> bool:
        return self.fee_per_person == 0

    @property
    def is_full(self) -> bool:
        if self.max_party is None or self.current_party is None:
            return False
        return self.current_party >= self.max_party

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "Challenge":
        """
        Build a Challenge from the server's camelCase detail payload.

        Accepts either the bare object or the ``{"data": {...}}`` envelope.
        """
        if not isinstance(payload, dict):
            raise MalformedChallengeError("Challenge payload must be an object", raw_value=payload)
        if "challengeId" not in payload and isinstance(payload.get("data"), dict):
            payload = payload["data"]

        end_date = payload.get("challengeEndDate")
        reviews = payload.get("challengeReviews") or []

        return cls(
            id=_parse_int(_require(payload, "challengeId"), "challengeId"),
            title=str(_require(payload, "challengeTitle")),
            fee_per_person=_parse_int(_require(payload, "challengeFeePerPerson"),
                                      "challengeFeePerPerson"),
            start_date=_parse_date(_require(payload, "challengeStartDate"), "challengeStartDate"),
            end_date=_parse_date(end_date, "challengeEndDate") if end_date else None,
            min_party=_optional_int(payload, "challengeMinParty"),
            max_party=_optional_int(payload, "challengeMaxParty"),
            current_party=_optional_int(payload, "challengeCurrentParty"),
            view_count=_optional_int(payload, "challengeViewCount") or 0,
            description=payload.get("challengeDescription") or "",
            auth_description=payload.get("challengeAuthDescription") or "",
            auth_available_times=tuple(payload.get("challengeAuthAvailableTime") or ()),
            rep_image_path=payload.get("challengeRepImagePath"),
            exam_image_paths=tuple(payload.get("challengeExamImagePath") or ()),
            review_image_paths=tuple(
                r["challengeReviewImagePath"] for r in reviews
                if isinstance(r, dict) and r.get("challengeReviewImagePath")
            ),
        )
