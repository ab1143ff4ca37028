"""FastAPI application factory for one release of the demo service.

This module composes the request logger and route handlers for a single
release profile. Both the blue and the green deployment are built here.
"""

from fastapi import FastAPI

from bluegreen.domain import ReleaseProfile, RuntimeInfoPort, SystemRuntimeInfoProvider

from .middleware import api_register_request_logging
from .routers import api_create_health_router, api_create_info_router, api_create_landing_router


def create_api_application(
    release_profile: ReleaseProfile,
    runtime_provider: RuntimeInfoPort | None = None,
) -> FastAPI:
    """Create the FastAPI application instance for one release.

    Args:
        release_profile: Static release identity served by every endpoint.
        runtime_provider: Optional runtime info provider; the local host and clock are used when omitted.

    Returns:
        FastAPI: Framework application instance with all release routes.

    Raises:
        ValueError: Raised when release_profile is invalid.
    """

    if release_profile is None:
        raise ValueError("release_profile must not be None")
    resolved_runtime_provider = runtime_provider or SystemRuntimeInfoProvider()

    application = FastAPI(
        title=f"Blue-Green Deployment Demo ({release_profile.environment_title})",
        version=release_profile.version,
    )
    api_register_request_logging(application)

    application.include_router(
        api_create_health_router(release_profile=release_profile, runtime_provider=resolved_runtime_provider)
    )
    application.include_router(
        api_create_landing_router(release_profile=release_profile, runtime_provider=resolved_runtime_provider)
    )
    application.include_router(
        api_create_info_router(release_profile=release_profile, runtime_provider=resolved_runtime_provider)
    )

    return application
