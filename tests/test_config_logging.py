"""Tests for process-wide logging setup."""

import logging
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from bluegreen.api.application import create_api_application
from bluegreen.config import ACCESS_LOGGER_NAME, SERVER_LOGGER_NAME, config_configure_logging
from bluegreen.domain import RELEASE_BLUE


@pytest.fixture
def _restore_logging() -> Iterator[None]:
    """Restore root handlers and named logger levels changed by the setup."""

    root_logger = logging.getLogger()
    original_handlers = list(root_logger.handlers)
    original_level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
    for handler in original_handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(original_level)
    for logger_name in (ACCESS_LOGGER_NAME, SERVER_LOGGER_NAME):
        logging.getLogger(logger_name).setLevel(logging.NOTSET)


@pytest.mark.usefixtures("_restore_logging")
def test_config_configure_logging_keeps_request_lines_under_quiet_root_level(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Print the access line to stdout even when the root level is WARNING.

    Returns:
        None: Assertions validate stdout output and logger levels.

    Raises:
        AssertionError: Raised when request lines are filtered out.
    """

    config_configure_logging("WARNING")
    client = TestClient(create_api_application(RELEASE_BLUE))

    client.get("/health")

    output_lines = capsys.readouterr().out.splitlines()
    assert [line for line in output_lines if line.endswith(" - GET /health")]
    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger(ACCESS_LOGGER_NAME).getEffectiveLevel() == logging.INFO
    assert logging.getLogger(SERVER_LOGGER_NAME).getEffectiveLevel() == logging.INFO


@pytest.mark.usefixtures("_restore_logging")
def test_config_configure_logging_writes_message_only_lines(capsys: pytest.CaptureFixture[str]) -> None:
    """Write lifecycle lines verbatim without level or logger prefixes."""

    config_configure_logging("ERROR")

    logging.getLogger(SERVER_LOGGER_NAME).info("🌐 Server started at 2026-10-19T12:00:00.000Z")
    logging.getLogger("bluegreen.other").warning("suppressed")

    assert capsys.readouterr().out == "🌐 Server started at 2026-10-19T12:00:00.000Z\n"
