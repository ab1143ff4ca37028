"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from bluegreen.api import create_api_application
from bluegreen.config import AppSettings, config_load_settings
from bluegreen.domain import ReleaseProfile, SystemRuntimeInfoProvider, domain_get_release_profile
from bluegreen.server import ReleaseServer, server_build


def bootstrap_resolve_release_profile(settings: AppSettings) -> ReleaseProfile:
    """Resolve the release profile selected by runtime settings.

    Args:
        settings: Validated runtime settings.

    Returns:
        ReleaseProfile: Release served by this process.

    Raises:
        UnknownReleaseError: Raised when the configured release is unknown.
    """

    return domain_get_release_profile(settings.release_name)


def bootstrap_create_application(
    settings: AppSettings | None = None,
    release_profile: ReleaseProfile | None = None,
) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-loaded settings; loaded from the environment when omitted.
        release_profile: Optional pre-resolved release; resolved from settings when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    if release_profile is None:
        release_profile = bootstrap_resolve_release_profile(settings or config_load_settings())
    return create_api_application(
        release_profile=release_profile,
        runtime_provider=SystemRuntimeInfoProvider(),
    )


def bootstrap_create_server(settings: AppSettings) -> ReleaseServer:
    """Build the release server and its application from validated settings.

    Args:
        settings: Validated runtime settings.

    Returns:
        ReleaseServer: Configured server ready to run.

    Raises:
        UnknownReleaseError: Raised when the configured release is unknown.
    """

    release_profile = bootstrap_resolve_release_profile(settings)
    return server_build(
        settings=settings,
        application=bootstrap_create_application(settings, release_profile=release_profile),
        release_profile=release_profile,
    )
