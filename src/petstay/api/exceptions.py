"""FastAPI exception handlers for converting ReservationSiteError to HTTP responses.

The ErrorCode-to-HTTP status mapping follows REST conventions:
- 400 Bad Request: Validation failures, malformed bodies, invalid paths
- 404 Not Found: Missing static files
- 405 Method Not Allowed: Non-GET/HEAD requests for static files
- 413 Payload Too Large: Bodies over the size cap
- 500 Internal Server Error: Read failures and unexpected errors

Usage:
    from petstay.api.exceptions import register_exception_handlers
    register_exception_handlers(app)
"""

from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_405_METHOD_NOT_ALLOWED,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from petstay.models.errors import (
    GENERIC_ERROR_MESSAGE,
    ErrorCode,
    ErrorResponse,
    ReservationSiteError,
)
from petstay.utils.logging import get_logger

logger = get_logger(__name__)

ERROR_CODE_TO_HTTP_STATUS: dict[ErrorCode, int] = {
    # Client-correctable -> 400 Bad Request
    ErrorCode.VALIDATION_FAILED: HTTP_400_BAD_REQUEST,
    ErrorCode.MALFORMED_BODY: HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PATH: HTTP_400_BAD_REQUEST,
    ErrorCode.PAYLOAD_TOO_LARGE: HTTPStatus.REQUEST_ENTITY_TOO_LARGE,
    ErrorCode.NOT_FOUND: HTTP_404_NOT_FOUND,
    ErrorCode.METHOD_NOT_ALLOWED: HTTP_405_METHOD_NOT_ALLOWED,
    # Server faults -> 500
    ErrorCode.READ_ERROR: HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.SUBMISSION_FAILED: HTTP_500_INTERNAL_SERVER_ERROR,
}


def get_http_status_for_error(code: ErrorCode) -> int:
    """Get HTTP status code for an ErrorCode, defaulting to 400."""
    return ERROR_CODE_TO_HTTP_STATUS.get(code, HTTP_400_BAD_REQUEST)


async def site_error_handler(request: Request, exc: ReservationSiteError) -> JSONResponse:
    """Convert ReservationSiteError to a JSON error response.

    Args:
        request: The incoming request (unused but required by FastAPI)
        exc: The ReservationSiteError exception

    Returns:
        JSONResponse with ``error`` (and ``errors`` for validation failures).
    """
    status_code = get_http_status_for_error(exc.code)
    headers = None
    if exc.code is ErrorCode.METHOD_NOT_ALLOWED:
        headers = {"Allow": "GET, HEAD"}

    return JSONResponse(
        status_code=status_code,
        content=exc.to_error_response().to_content(),
        headers=headers,
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Route-level 405s (methods no route lists) use the site's error body.

    Any other framework HTTP error keeps FastAPI's default handling.
    """
    if exc.status_code == HTTP_405_METHOD_NOT_ALLOWED:
        return await site_error_handler(
            request, ReservationSiteError(ErrorCode.METHOD_NOT_ALLOWED)
        )
    return await http_exception_handler(request, exc)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions with a generic 500 response.

    The traceback is logged; the client only sees a generic message.
    """
    logger.exception("Unhandled exception on %s %s: %s", request.method, request.url.path, exc)

    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error=GENERIC_ERROR_MESSAGE).to_content(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(ReservationSiteError, site_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, generic_exception_handler)
