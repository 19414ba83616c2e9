"""Standard error codes for the reservation site.

Every failure the site reports to a client is one of these codes. Routes and
services raise ReservationSiteError; the API layer turns it into a JSON body
of the form ``{"error": ..., "errors": [...]}``.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ErrorCode(str, Enum):
    """Error codes for submission and static file failures."""

    # Submission errors (client-correctable)
    VALIDATION_FAILED = "ERR_VALIDATION"
    MALFORMED_BODY = "ERR_MALFORMED_BODY"
    PAYLOAD_TOO_LARGE = "ERR_PAYLOAD_TOO_LARGE"

    # Static file errors
    INVALID_PATH = "ERR_INVALID_PATH"
    NOT_FOUND = "ERR_NOT_FOUND"
    METHOD_NOT_ALLOWED = "ERR_METHOD_NOT_ALLOWED"
    READ_ERROR = "ERR_READ"

    # Server faults
    SUBMISSION_FAILED = "ERR_SUBMISSION"


# Human-readable error messages
ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.VALIDATION_FAILED: "Reservation request is invalid.",
    ErrorCode.MALFORMED_BODY: "Request body must be a valid JSON object.",
    ErrorCode.PAYLOAD_TOO_LARGE: "Request body too large.",
    ErrorCode.INVALID_PATH: "Invalid path.",
    ErrorCode.NOT_FOUND: "Not found.",
    ErrorCode.METHOD_NOT_ALLOWED: "Method not allowed.",
    ErrorCode.READ_ERROR: "Could not read file.",
    ErrorCode.SUBMISSION_FAILED: "Server error while processing reservation request.",
}

GENERIC_ERROR_MESSAGE = "An unexpected error occurred."


class ErrorResponse(BaseModel):
    """JSON body returned for every failed request.

    ``errors`` is only present for validation failures.
    """

    model_config = ConfigDict(strict=True)

    error: str
    errors: Optional[list[str]] = None

    def to_content(self) -> dict[str, object]:
        return self.model_dump(mode="json", exclude_none=True)


class ReservationSiteError(Exception):
    """Exception raised by submission and static file operations.

    For VALIDATION_FAILED the first entry of ``errors`` becomes the primary
    message shown to the guest.
    """

    def __init__(
        self,
        code: ErrorCode,
        errors: Optional[list[str]] = None,
    ):
        self.code = code
        self.errors = list(errors) if errors else None
        if code is ErrorCode.VALIDATION_FAILED and self.errors:
            self.message = self.errors[0]
        else:
            self.message = ERROR_MESSAGES[code]
        super().__init__(self.message)

    def to_error_response(self) -> ErrorResponse:
        """Convert this exception to the JSON error body."""
        return ErrorResponse(error=self.message, errors=self.errors)
