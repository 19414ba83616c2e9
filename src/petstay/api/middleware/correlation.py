"""Correlation ID middleware for request tracing.

Takes the X-Correlation-ID header from the request, or generates a new ID
when the header is missing or unusable, and echoes it on the response.
The ID is held in a contextvar, so every log line written while handling the
request (site reads, submissions, handled errors) carries it as a prefix.
"""

import re

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from petstay.utils.logging import clear_correlation_id, set_correlation_id

CORRELATION_ID_HEADER = "X-Correlation-ID"

# Printable, no whitespace, bounded; the value is written verbatim into log lines
_ACCEPTED_CORRELATION_ID = re.compile(r"[A-Za-z0-9._:\-]{1,128}")


def accept_correlation_id(header_value: str | None) -> str | None:
    """Return the client's correlation ID if it is safe to log, else None.

    Args:
        header_value: Raw X-Correlation-ID header value, if sent

    Returns:
        The value unchanged, or None so a fresh ID is generated
    """
    if header_value and _ACCEPTED_CORRELATION_ID.fullmatch(header_value):
        return header_value
    return None


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware that manages correlation IDs for request tracing."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Bind a correlation ID for the request and add it to the response.

        Args:
            request: Incoming request
            call_next: Next middleware/handler in chain

        Returns:
            Response with the correlation ID header
        """
        correlation_id = set_correlation_id(
            accept_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
        )

        try:
            response = await call_next(request)
            response.headers[CORRELATION_ID_HEADER] = correlation_id
            return response
        finally:
            # Context is per request; never leak an ID into the next one
            clear_correlation_id()
