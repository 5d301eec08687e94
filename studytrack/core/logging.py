"""Logfire wiring for the tracker.

Modules log through ``logging.getLogger(__name__)``; once ``configure_logfire``
has run, those records are shipped alongside the spans. Every store-mutating
service operation opens one span named ``<service module>.<function>``, so a
single assignment create shows up as ``assignment_service.add_handwritten_assignment``
with the store's "Created record" and the "Linked shadow task" logs nested
under it.

Store logs carry their context in ``extra`` (``collection``, ``record_id``,
``task_id``, ``source_type``, ``source_id``). The HTTP error handler uses
``log_with_context`` for the same shape:
    log_with_context(logger, "warning", "Request failed", code="ERR_RECORD_NOT_FOUND", path="/tasks/9")
"""

import logging

import logfire
from fastapi import FastAPI

from studytrack.core.config import settings


logger = logging.getLogger(__name__)


def configure_logfire() -> None:
    """Configure Logfire for the studytrack service.

    Without ``LOGFIRE_TOKEN`` nothing leaves the process; spans and logs are
    still created, so local runs and tests exercise the same code path.
    """
    logfire.configure(
        token=settings.logfire_token,
        service_name="studytrack",
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire="if-token-present",
    )
    logger.info("Logfire configured", extra={"environment": settings.environment})


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every API request; service spans nest under the request span."""
    logfire.instrument_fastapi(app)
    logger.info("FastAPI instrumentation configured")


def span(name: str) -> logfire.LogfireSpan:
    """Open a span around one service operation.

    Usage:
        with span("project_service.update_project"):
            ...
    """
    return logfire.span(name)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **context: object,
) -> None:
    """Log ``message`` at ``level`` with ``context`` passed as structured ``extra`` fields.

    Context keys must not clash with ``LogRecord`` attributes (``name``,
    ``message``, ``module`` and so on).
    """
    log_method = getattr(logger, level.lower())
    log_method(message, extra=context)
