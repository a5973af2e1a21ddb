"""Structured logging setup and per-request log context."""

import logging
import uuid

import structlog
from flask import Flask, g, request, session

REQUEST_ID_HEADER = "X-Request-ID"


def setup_structured_logging(*, json_output: bool = False, level: str = "INFO") -> None:
    """Configure structlog for JSON output in production, console in dev.

    Values bound with ``structlog.contextvars`` (request id, path, uid) are
    merged into every event.
    """

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[*shared_processors, renderer],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))


def install_request_context(app: Flask) -> None:
    """Tag each request with an id and bind it into the log context."""

    @app.before_request
    def _bind_request_context():
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        g.request_id = request_id
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.path,
            uid=session.get("uid"),
        )

    @app.after_request
    def _echo_request_id(response):
        request_id = g.get("request_id")
        if request_id:
            response.headers[REQUEST_ID_HEADER] = request_id
        return response

    @app.teardown_request
    def _clear_request_context(exc=None):
        structlog.contextvars.clear_contextvars()
