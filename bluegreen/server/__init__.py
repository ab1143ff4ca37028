"""Server lifecycle package for binding, readiness and graceful termination."""

from .lifecycle import (
    SERVER_LOGGER_NAME,
    ReleaseServer,
    server_build,
    server_ready_lines,
    server_run,
    server_shutdown_line,
)

__all__ = [
    "SERVER_LOGGER_NAME",
    "ReleaseServer",
    "server_build",
    "server_ready_lines",
    "server_run",
    "server_shutdown_line",
]
