"""API routes package.

- health: Health check endpoint
- reservations: Reservation submission and booking window
- site: Static website files (catch-all, registered last)

The health and reservations routers are mounted under /api in main.py.
"""

from petstay.api.routes.health import router as health_router
from petstay.api.routes.reservations import router as reservations_router
from petstay.api.routes.site import router as site_router

__all__ = [
    "health_router",
    "reservations_router",
    "site_router",
]
