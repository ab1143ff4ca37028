"""Request logging middleware emitting one line per inbound request."""

from __future__ import annotations

import logging
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response

from bluegreen.config import ACCESS_LOGGER_NAME
from bluegreen.domain import domain_utc_timestamp

_access_logger = logging.getLogger(ACCESS_LOGGER_NAME)


def api_format_request_line(timestamp: str, method: str, target: str) -> str:
    """Format one access log line.

    Args:
        timestamp: ISO-8601 request timestamp.
        method: HTTP method.
        target: Request path including the query string when present.

    Returns:
        str: Line such as `2026-10-19T12:00:00.000Z - GET /health`.
    """

    return f"{timestamp} - {method} {target}"


def api_register_request_logging(application: FastAPI) -> None:
    """Attach the request logging middleware to an application.

    Every request is logged before routing, including requests that end in
    a 404. The middleware never alters the response.

    Args:
        application: Application receiving the middleware.

    Raises:
        ValueError: Raised when application is invalid.
    """

    if application is None:
        raise ValueError("application must not be None")

    @application.middleware("http")
    async def api_log_request(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"
        _access_logger.info(api_format_request_line(domain_utc_timestamp(), request.method, target))
        return await call_next(request)
