"""Structured logging utilities with correlation ID support.

Provides:
- Correlation ID context management for request tracing
- Structured logging formatter for consistent log output
- Helper for logging reservation submission outcomes

Usage:
    from petstay.utils.logging import get_logger, set_correlation_id

    # In middleware/request handler:
    set_correlation_id(request.headers.get("X-Correlation-ID"))

    # In service code:
    logger = get_logger(__name__)
    logger.info("Reservation accepted", extra={"pet_name": "Fluffy"})
"""

import logging
import uuid
from contextvars import ContextVar
from typing import Any

# Context variable for correlation ID - thread-safe and async-safe
_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def generate_correlation_id() -> str:
    """Generate a new correlation ID.

    Returns:
        UUID-based correlation ID string
    """
    return str(uuid.uuid4())


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Set the correlation ID for the current request context.

    Args:
        correlation_id: Optional existing correlation ID. If None, generates new one.

    Returns:
        The correlation ID that was set
    """
    cid = correlation_id or generate_correlation_id()
    _correlation_id.set(cid)
    return cid


def get_correlation_id() -> str | None:
    """Get the correlation ID of the request being handled.

    Returns:
        Current correlation ID or None outside a request
    """
    return _correlation_id.get()


def clear_correlation_id() -> None:
    """Clear the correlation ID context."""
    _correlation_id.set(None)


class CorrelationIdFilter(logging.Filter):
    """Logging filter that adds correlation_id to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Stamp the record with the current correlation ID.

        Args:
            record: Log record to modify

        Returns:
            True (always allows the record through)
        """
        record.correlation_id = get_correlation_id() or "no-correlation-id"
        return True


class StructuredFormatter(logging.Formatter):
    """Formatter for structured log output with correlation ID."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with a ``[correlation-id]`` prefix.

        Args:
            record: Log record to format

        Returns:
            Formatted log string
        """
        if not hasattr(record, "correlation_id"):
            record.correlation_id = get_correlation_id() or "no-correlation-id"

        base = super().format(record)

        # Prefix for easy grep/filtering
        return f"[{record.correlation_id}] {base}"


def get_logger(name: str) -> logging.Logger:
    """Get a logger with correlation ID support.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not any(isinstance(f, CorrelationIdFilter) for f in logger.filters):
        logger.addFilter(CorrelationIdFilter())

    return logger


def configure_logging(level: str | int = logging.INFO) -> None:
    """Install a structured stream handler on the ``petstay`` logger.

    Safe to call more than once; the handler is only added the first time.

    Args:
        level: Log level name or number
    """
    logger = logging.getLogger("petstay")
    logger.setLevel(level)

    if not any(isinstance(h.formatter, StructuredFormatter) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(StructuredFormatter(LOG_FORMAT))
        handler.addFilter(CorrelationIdFilter())
        logger.addHandler(handler)


def log_submission_outcome(
    logger: logging.Logger,
    outcome: str,
    *,
    pet_name: str | None = None,
    check_in: str | None = None,
    check_out: str | None = None,
    errors: list[str] | None = None,
    error: str | None = None,
    **extra: Any,
) -> None:
    """Log a reservation submission with structured context.

    Args:
        logger: Logger instance
        outcome: "accepted", "rejected" or "persist_failed"
        pet_name: Pet name from the submission, if any
        check_in: Raw check-in value
        check_out: Raw check-out value
        errors: Validation errors for rejected submissions
        error: Error message if persisting failed
        **extra: Additional context fields
    """
    context: dict[str, Any] = {"outcome": outcome}

    if pet_name:
        context["pet_name"] = pet_name
    if check_in:
        context["check_in"] = check_in
    if check_out:
        context["check_out"] = check_out
    if errors:
        context["error_count"] = len(errors)
    if error:
        context["error"] = error

    context.update(extra)

    msg_parts = [f"Reservation submission: {outcome}"]
    for key, value in context.items():
        if key != "outcome":
            msg_parts.append(f"{key}={value}")

    message = " | ".join(msg_parts)

    if outcome == "persist_failed":
        logger.error(message, extra=context)
    elif outcome == "rejected":
        logger.warning(message, extra=context)
    else:
        logger.info(message, extra=context)
