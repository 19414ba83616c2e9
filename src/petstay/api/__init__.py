"""HTTP layer: FastAPI app, routes, middleware and exception handlers."""
