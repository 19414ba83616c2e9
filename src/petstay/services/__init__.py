"""Services for the PetStay reservation site."""

from .reservation_log import ReservationLog
from .static_files import StaticFile, StaticResponder
from .stay_policy import earliest_check_in, evaluate_stay_dates, parse_stay_date
from .submission import ReservationSubmissionService

__all__ = [
    "ReservationLog",
    "ReservationSubmissionService",
    "StaticFile",
    "StaticResponder",
    "earliest_check_in",
    "evaluate_stay_dates",
    "parse_stay_date",
]
