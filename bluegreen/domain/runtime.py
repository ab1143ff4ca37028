"""Runtime snapshot capture for per-request host and clock values."""

from __future__ import annotations

import platform
import socket
import sys
from datetime import datetime, timezone

from .models import RuntimeSnapshot


def domain_utc_timestamp() -> str:
    """Return the current UTC wall-clock time in ISO-8601 format.

    Returns:
        str: Timestamp such as `2026-10-19T12:00:00.123Z`.
    """

    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class SystemRuntimeInfoProvider:
    """Runtime info provider backed by the local clock and host."""

    def runtime_capture(self) -> RuntimeSnapshot:
        """Capture timestamp, host name, platform and interpreter version.

        Returns:
            RuntimeSnapshot: Values describing the serving process right now.

        Raises:
            RuntimeError: This provider does not raise runtime errors.
        """

        return RuntimeSnapshot(
            timestamp=domain_utc_timestamp(),
            hostname=socket.gethostname(),
            platform=sys.platform,
            runtime_version=platform.python_version(),
        )
