"""Health endpoint router composition for release liveness checks."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from bluegreen.domain import ReleaseProfile, RuntimeInfoPort


def api_create_health_router(release_profile: ReleaseProfile, runtime_provider: RuntimeInfoPort) -> APIRouter:
    """Create health-check router reporting the fixed release identity.

    Args:
        release_profile: Release identity reported by the endpoint.
        runtime_provider: Runtime info provider used for the response timestamp.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if release_profile is None:
        raise ValueError("release_profile must not be None")
    if runtime_provider is None:
        raise ValueError("runtime_provider must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return the static healthy state for the running release.

        Returns:
            JSONResponse: Health payload, deterministic except for the timestamp.
        """

        payload = {
            "status": "healthy",
            "version": release_profile.version,
            "environment": release_profile.environment,
            "timestamp": runtime_provider.runtime_capture().timestamp,
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router
