"""Pydantic models for reservation requests, records and errors."""

from .errors import ErrorCode, ErrorResponse, ReservationSiteError
from .reservation import (
    REQUIRED_FIELDS,
    DateField,
    PolicyViolation,
    ReservationAccepted,
    ReservationRecord,
    ReservationRequest,
    StayPolicyResponse,
    ValidationOutcome,
)

__all__ = [
    "REQUIRED_FIELDS",
    "DateField",
    "ErrorCode",
    "ErrorResponse",
    "PolicyViolation",
    "ReservationAccepted",
    "ReservationRecord",
    "ReservationRequest",
    "ReservationSiteError",
    "StayPolicyResponse",
    "ValidationOutcome",
]
