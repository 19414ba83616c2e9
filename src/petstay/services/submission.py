"""Reservation submission service.

Turns a raw request body into an accept/reject decision:
- Decodes JSON or URL-encoded form bodies into a ReservationRequest
- Collects every validation error (required fields, dates, email)
- Appends accepted requests to the reservation log

Rejections raise ReservationSiteError so the API layer can map them to
HTTP responses. Failures while appending to the log are logged and
swallowed; once validation passes the submission is reported as accepted.
"""

import json
import re
from typing import Any
from urllib.parse import parse_qsl

from petstay.clock import Clock
from petstay.models.errors import ErrorCode, ReservationSiteError
from petstay.models.reservation import (
    REQUIRED_FIELDS,
    ReservationAccepted,
    ReservationRecord,
    ReservationRequest,
    StayPolicyResponse,
    ValidationOutcome,
)
from petstay.services.reservation_log import ReservationLog
from petstay.services.stay_policy import (
    DEFAULT_MIN_LEAD_DAYS,
    earliest_check_in,
    evaluate_stay_dates,
    format_stay_date,
    parse_stay_date,
)
from petstay.utils.logging import get_logger, log_submission_outcome

logger = get_logger(__name__)

DEFAULT_MAX_BODY_BYTES = 1_000_000
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
SUCCESS_MESSAGE = (
    "Reservation request submitted successfully. "
    "We will confirm availability within one business day."
)


class ReservationSubmissionService:
    """Validates reservation requests and records the accepted ones."""

    def __init__(
        self,
        log: ReservationLog,
        clock: Clock,
        *,
        min_lead_days: int = DEFAULT_MIN_LEAD_DAYS,
        max_body_bytes: int = DEFAULT_MAX_BODY_BYTES,
    ):
        self.log = log
        self.clock = clock
        self.min_lead_days = min_lead_days
        self.max_body_bytes = max_body_bytes

    def decode_body(self, raw: bytes, content_type: str | None) -> dict[str, Any]:
        """Decode a request body into a field mapping.

        JSON is used when the content type mentions ``application/json``;
        anything else is treated as URL-encoded form data.

        Args:
            raw: Request body bytes
            content_type: Value of the Content-Type header, if any

        Returns:
            Decoded payload

        Raises:
            ReservationSiteError: PAYLOAD_TOO_LARGE if the body is over the
                cap, MALFORMED_BODY if a JSON body is not a JSON object.
        """
        if len(raw) > self.max_body_bytes:
            raise ReservationSiteError(ErrorCode.PAYLOAD_TOO_LARGE)

        text = raw.decode("utf-8", errors="replace")

        if "application/json" in (content_type or "").lower():
            try:
                payload = json.loads(text or "{}")
            except json.JSONDecodeError as e:
                raise ReservationSiteError(ErrorCode.MALFORMED_BODY) from e
            if not isinstance(payload, dict):
                raise ReservationSiteError(ErrorCode.MALFORMED_BODY)
            return payload

        # Last value wins for repeated keys
        return dict(parse_qsl(text, keep_blank_values=True))

    def validate(self, request: ReservationRequest) -> ValidationOutcome:
        """Collect every validation error for a request, in display order."""
        errors: list[str] = []

        for field_name in REQUIRED_FIELDS:
            if not request.field_value(field_name).strip():
                errors.append(f"{field_name} is required.")

        # Present but unparseable dates get their own error
        if request.check_in.strip() and parse_stay_date(request.check_in) is None:
            errors.append("Check-in must be a valid date.")
        if request.check_out.strip() and parse_stay_date(request.check_out) is None:
            errors.append("Check-out must be a valid date.")

        violations = evaluate_stay_dates(
            request.check_in,
            request.check_out,
            today=self.clock.today(),
            min_lead_days=self.min_lead_days,
        )
        errors.extend(violation.message for violation in violations)

        if request.email.strip() and not EMAIL_PATTERN.fullmatch(request.email):
            errors.append("Email must be valid.")

        return ValidationOutcome(errors=errors)

    def describe_policy(self) -> StayPolicyResponse:
        """Booking window for the reservation form, based on today's date."""
        today = self.clock.today()
        return StayPolicyResponse(
            min_lead_days=self.min_lead_days,
            today=format_stay_date(today),
            earliest_check_in=format_stay_date(earliest_check_in(today, self.min_lead_days)),
        )

    async def submit(self, raw: bytes, content_type: str | None) -> ReservationAccepted:
        """Decode, validate and record a reservation request.

        Args:
            raw: Request body bytes
            content_type: Value of the Content-Type header, if any

        Returns:
            Confirmation message for the guest

        Raises:
            ReservationSiteError: VALIDATION_FAILED with the full error list,
                or a decoding error from decode_body.
        """
        payload = self.decode_body(raw, content_type)
        request = ReservationRequest.model_validate(payload)

        outcome = self.validate(request)
        if not outcome.accepted:
            log_submission_outcome(
                logger,
                "rejected",
                check_in=request.check_in,
                check_out=request.check_out,
                errors=outcome.errors,
            )
            raise ReservationSiteError(ErrorCode.VALIDATION_FAILED, errors=outcome.errors)

        record = ReservationRecord(created_at=self.clock.now(), reservation=payload)
        try:
            await self.log.append(record)
        except OSError as e:
            logger.exception("Failed to append reservation to %s", self.log.path)
            log_submission_outcome(
                logger,
                "persist_failed",
                pet_name=request.pet_name,
                error=str(e),
            )
        else:
            log_submission_outcome(
                logger,
                "accepted",
                pet_name=request.pet_name,
                check_in=request.check_in,
                check_out=request.check_out,
            )

        return ReservationAccepted(message=SUCCESS_MESSAGE)
