"""Server lifecycle for one release: bind, announce readiness, drain on termination.

Lifecycle states are *starting*, *listening* and *terminating*. Readiness is
logged only after the listener is bound. A termination signal is logged, new
connections stop being accepted, in-flight requests are drained within the
configured bound, and the process exits with code 0.
"""

from __future__ import annotations

import logging
import signal
import socket
from types import FrameType

import uvicorn
from fastapi import FastAPI

from bluegreen.config import SERVER_LOGGER_NAME, AppSettings
from bluegreen.domain import ReleaseProfile, domain_utc_timestamp

_server_logger = logging.getLogger(SERVER_LOGGER_NAME)


def server_ready_lines(release_profile: ReleaseProfile, port: int, started_at: str) -> tuple[str, str]:
    """Build the two readiness lines logged once the listener is bound.

    Args:
        release_profile: Release being served.
        port: Bound listener port.
        started_at: ISO-8601 start timestamp.

    Returns:
        tuple[str, str]: Ready line and start-timestamp line.
    """

    return (
        f"✅ Application v{release_profile.version} ({release_profile.environment_title}) "
        f"is running on port {port}",
        f"🌐 Server started at {started_at}",
    )


def server_shutdown_line(signal_number: int) -> str:
    """Build the line logged when a termination signal arrives.

    Args:
        signal_number: Received signal number.

    Returns:
        str: Line such as `SIGTERM signal received: closing HTTP server`.
    """

    try:
        signal_name = signal.Signals(signal_number).name
    except ValueError:
        signal_name = f"Signal {signal_number}"
    return f"{signal_name} signal received: closing HTTP server"


class ReleaseServer(uvicorn.Server):
    """Uvicorn server that reports release readiness and termination."""

    def __init__(self, config: uvicorn.Config, release_profile: ReleaseProfile) -> None:
        super().__init__(config=config)
        self.release_profile = release_profile

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        await super().startup(sockets=sockets)
        if not self.started:
            return
        for line in server_ready_lines(self.release_profile, self.config.port, domain_utc_timestamp()):
            _server_logger.info(line)

    def handle_exit(self, sig: int, frame: FrameType | None) -> None:
        if not self.should_exit:
            _server_logger.info(server_shutdown_line(sig))
        super().handle_exit(sig, frame)


def _server_exit_cleanly(signal_number: int, frame: FrameType | None) -> None:
    _ = (signal_number, frame)
    raise SystemExit(0)


def server_build(settings: AppSettings, application: FastAPI, release_profile: ReleaseProfile) -> ReleaseServer:
    """Build the release server from validated settings.

    Args:
        settings: Validated runtime settings with host, port and shutdown bound.
        application: ASGI application to serve.
        release_profile: Release being served.

    Returns:
        ReleaseServer: Configured, not yet started server.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if application is None:
        raise ValueError("application must not be None")
    if release_profile is None:
        raise ValueError("release_profile must not be None")

    config = uvicorn.Config(
        application,
        host=settings.host,
        port=settings.port,
        access_log=False,
        log_config=None,
        log_level=settings.log_level.lower(),
        timeout_graceful_shutdown=settings.graceful_shutdown_seconds,
    )
    return ReleaseServer(config=config, release_profile=release_profile)


def server_run(server: ReleaseServer) -> None:
    """Run the server until a termination signal completes graceful shutdown.

    Signals that the server re-delivers after draining end the process with
    exit code 0. Bind failures are left to uvicorn, which exits non-zero.

    Args:
        server: Server built by `server_build`.

    Returns:
        None: Returns only when the server stops without a termination signal.

    Raises:
        SystemExit: Raised with code 0 when a termination signal ends the server.
    """

    for handled_signal in (signal.SIGINT, signal.SIGTERM):
        signal.signal(handled_signal, _server_exit_cleanly)
    server.run()
