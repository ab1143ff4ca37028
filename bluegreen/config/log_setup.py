"""Process-wide logging setup writing plain lines to stdout."""

import logging
import sys

ACCESS_LOGGER_NAME = "bluegreen.access"
SERVER_LOGGER_NAME = "bluegreen.server"

# Request and lifecycle lines are part of the service contract.
_ALWAYS_INFO_LOGGER_NAMES = (ACCESS_LOGGER_NAME, SERVER_LOGGER_NAME)


def config_configure_logging(log_level: str = "INFO") -> None:
    """Configure root logging so access and lifecycle lines print verbatim.

    The root level follows `log_level`; the access and server loggers stay
    at INFO so every request line, both readiness lines and the termination
    line are emitted under any configured level.

    Args:
        log_level: Root log level name.

    Returns:
        None: Logging is configured as side effect.
    """

    logging.basicConfig(
        stream=sys.stdout,
        level=log_level,
        format="%(message)s",
        force=True,
    )
    for logger_name in _ALWAYS_INFO_LOGGER_NAMES:
        logging.getLogger(logger_name).setLevel(logging.INFO)
