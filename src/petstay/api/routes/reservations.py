"""Reservation endpoints.

Provides REST endpoints for:
- Submitting a reservation request (JSON or URL-encoded form)
- Reading the booking window the reservation form should offer

The server re-validates every submission; checks done by the form in the
browser are only for immediate feedback.
"""

from contextlib import aclosing

from fastapi import APIRouter, Depends, Request, Response
from starlette.requests import ClientDisconnect
from starlette.status import HTTP_201_CREATED, HTTP_400_BAD_REQUEST

from petstay.api.dependencies import get_submission_service
from petstay.models.errors import ErrorCode, ErrorResponse, ReservationSiteError
from petstay.models.reservation import ReservationAccepted, StayPolicyResponse
from petstay.services.submission import ReservationSubmissionService
from petstay.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["reservations"])


async def read_body_capped(request: Request, max_bytes: int) -> bytes:
    """Collect the request body, giving up once it exceeds ``max_bytes``.

    The request stream is closed on every exit path, including when the
    cap is hit part way through.

    Raises:
        ReservationSiteError: PAYLOAD_TOO_LARGE if the declared or received
            size is over the cap.
        ClientDisconnect: If the client goes away mid-body.
    """
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > max_bytes:
        raise ReservationSiteError(ErrorCode.PAYLOAD_TOO_LARGE)

    chunks: list[bytes] = []
    received = 0
    async with aclosing(request.stream()) as stream:
        async for chunk in stream:
            received += len(chunk)
            if received > max_bytes:
                raise ReservationSiteError(ErrorCode.PAYLOAD_TOO_LARGE)
            chunks.append(chunk)

    return b"".join(chunks)


@router.post(
    "/reservations",
    summary="Submit reservation request",
    description="""
Submit a reservation request for a hamster stay.

Accepts `application/json` or `application/x-www-form-urlencoded` bodies with
the fields `owner-name`, `email`, `hamster-name`, `check-in` and `check-out`
(dates as YYYY-MM-DD). Accepted requests are appended to the reservation log.

**Notes:**
- Check-in must be at least the configured lead time after today
- Check-out must be after check-in
- All validation errors are returned together; `error` holds the first one
""",
    response_model=ReservationAccepted,
    status_code=HTTP_201_CREATED,
    responses={
        201: {"description": "Reservation request accepted"},
        400: {"description": "Validation failed or malformed body", "model": ErrorResponse},
        413: {"description": "Request body too large", "model": ErrorResponse},
        500: {"description": "Unexpected server error", "model": ErrorResponse},
    },
)
async def submit_reservation(
    request: Request,
    service: ReservationSubmissionService = Depends(get_submission_service),
) -> ReservationAccepted | Response:
    """Validate a reservation request and record it if it is acceptable."""
    try:
        raw = await read_body_capped(request, service.max_body_bytes)
        return await service.submit(raw, request.headers.get("content-type"))
    except ReservationSiteError:
        raise
    except ClientDisconnect:
        logger.info("Client disconnected before the reservation body was received")
        return Response(status_code=HTTP_400_BAD_REQUEST)
    except Exception as e:
        logger.exception("Unexpected error while processing reservation request")
        raise ReservationSiteError(ErrorCode.SUBMISSION_FAILED) from e


@router.get(
    "/reservations/policy",
    summary="Get booking window",
    description="Minimum lead time and earliest check-in date, for the reservation form.",
    response_model=StayPolicyResponse,
)
async def get_stay_policy(
    service: ReservationSubmissionService = Depends(get_submission_service),
) -> StayPolicyResponse:
    return service.describe_policy()
