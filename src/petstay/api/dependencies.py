"""FastAPI dependency providers for the services held on ``app.state``.

create_app() builds one instance of each service from the Settings it is
given and stores them on the application. Routes receive them through
these providers, so tests can build an app around a temporary static root,
a temporary log file and a frozen clock.

Usage in routes:
    from petstay.api.dependencies import get_submission_service

    @router.post("/reservations")
    async def submit(
        service: ReservationSubmissionService = Depends(get_submission_service),
    ):
        ...
"""

from fastapi import Request

from petstay.services.static_files import StaticResponder
from petstay.services.submission import ReservationSubmissionService


def get_submission_service(request: Request) -> ReservationSubmissionService:
    """Get the ReservationSubmissionService for this application."""
    return request.app.state.submission_service


def get_static_responder(request: Request) -> StaticResponder:
    """Get the StaticResponder for this application."""
    return request.app.state.static_responder
