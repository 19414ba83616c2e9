"""FastAPI application for the PetStay reservation site.

Serves:
- Health checks and the reservation API under /api
- The static website (HTML, CSS, JS, images) for every other path

create_app() wires the services from explicit Settings and a Clock, so
tests can build an app around a temporary static root, a temporary
reservation log and a frozen "today".
"""

from fastapi import FastAPI

from petstay import __version__
from petstay.api.exceptions import register_exception_handlers
from petstay.api.middleware.correlation import CorrelationIdMiddleware
from petstay.api.routes.health import router as health_router
from petstay.api.routes.reservations import router as reservations_router
from petstay.api.routes.site import router as site_router
from petstay.clock import Clock, SystemClock
from petstay.config import Settings, get_settings
from petstay.services.reservation_log import ReservationLog
from petstay.services.static_files import StaticResponder
from petstay.services.submission import ReservationSubmissionService
from petstay.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def create_app(settings: Settings | None = None, clock: Clock | None = None) -> FastAPI:
    """Build the application.

    Args:
        settings: Server settings (default: loaded from the environment)
        clock: Source of "today" for date rules (default: system clock)

    Returns:
        Configured FastAPI application.
    """
    settings = settings or get_settings()
    clock = clock or SystemClock()

    configure_logging(settings.log_level)

    app = FastAPI(
        title="PetStay Reservations",
        description="Hamster boarding website and reservation request API",
        version=__version__,
    )

    app.state.submission_service = ReservationSubmissionService(
        log=ReservationLog(settings.reservation_log),
        clock=clock,
        min_lead_days=settings.min_lead_days,
        max_body_bytes=settings.max_body_bytes,
    )
    app.state.static_responder = StaticResponder(
        settings.static_root,
        index_document=settings.index_document,
        content_types=settings.content_types,
    )

    app.add_middleware(CorrelationIdMiddleware)

    # Register exception handlers for consistent error responses
    register_exception_handlers(app)

    app.include_router(health_router, prefix="/api")
    app.include_router(reservations_router, prefix="/api")
    # Catch-all static route goes last
    app.include_router(site_router)

    logger.info(
        "Serving %s; logging reservations to %s",
        settings.static_root,
        settings.reservation_log,
    )
    return app


app = create_app()


def run_server(settings: Settings | None = None) -> None:
    """Run the server with uvicorn.

    Args:
        settings: Server settings (default: loaded from the environment)
    """
    import uvicorn

    settings = settings or get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run_server()
