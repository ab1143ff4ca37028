"""Typed interfaces for domain-level runtime collaborators."""

from typing import Protocol

from .models import RuntimeSnapshot


class RuntimeInfoPort(Protocol):
    """Port definition for capturing runtime-derived response values."""

    def runtime_capture(self) -> RuntimeSnapshot:
        """Capture the current timestamp and host details.

        Returns:
            RuntimeSnapshot: Runtime values for one response.

        Raises:
            RuntimeError: Raised when host metadata is unavailable.
        """
