"""
Challenge participation: eligibility, failure classification and the
controller that runs one join attempt end to end.
"""

from .classifier import classify_failure
from .controller import ParticipationController
from .eligibility import days_until_start, is_join_open, join_deadline

__all__ = [
    "ParticipationController",
    "classify_failure",
    "days_until_start",
    "is_join_open",
    "join_deadline",
]
