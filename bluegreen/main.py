"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the release service.
"""

import argparse
from typing import Sequence

from bluegreen.bootstrap import bootstrap_create_server
from bluegreen.config import config_configure_logging, config_load_settings
from bluegreen.domain import domain_list_release_names
from bluegreen.server import server_run


def main(argv: Sequence[str] | None = None, release_name: str | None = None) -> None:
    """Run the selected release with validated startup configuration.

    Args:
        argv: Optional argument vector; `sys.argv` is used when omitted.
        release_name: Optional fixed release used by per-release console scripts.

    Returns:
        None: Returns only when the server stops without a termination signal.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with code 0 after a termination signal completes graceful shutdown.
    """

    argument_parser = argparse.ArgumentParser(description="Blue-Green deployment demo service")
    argument_parser.add_argument(
        "release",
        nargs="?",
        default=release_name,
        choices=domain_list_release_names(),
        help="Release to serve: `v1` is blue/production, `v2` is green/staging. "
        "Defaults to the RELEASE_NAME setting",
        type=str,
    )
    parsed_arguments = argument_parser.parse_args(argv)

    overrides: dict[str, object] = {}
    if parsed_arguments.release is not None:
        overrides["release_name"] = parsed_arguments.release
    settings = config_load_settings(**overrides)
    config_configure_logging(settings.log_level)

    server_run(bootstrap_create_server(settings))


def main_blue() -> None:
    """Run the blue release (Version 1.0)."""

    main(release_name="v1")


def main_green() -> None:
    """Run the green release (Version 2.0)."""

    main(release_name="v2")


if __name__ == "__main__":
    main()
