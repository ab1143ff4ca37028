"""Info and features API router composition."""

from __future__ import annotations

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from bluegreen.domain import ReleaseProfile, RuntimeInfoPort


def api_create_info_router(release_profile: ReleaseProfile, runtime_provider: RuntimeInfoPort) -> APIRouter:
    """Create router exposing release and host metadata under `/api`.

    The `/api/features` route is registered only for releases that publish
    features, so other releases answer it with the framework's default 404.

    Args:
        release_profile: Release identity reported by the endpoints.
        runtime_provider: Runtime info provider for timestamp and host values.

    Returns:
        APIRouter: Router exposing info endpoints.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if release_profile is None:
        raise ValueError("release_profile must not be None")
    if runtime_provider is None:
        raise ValueError("runtime_provider must not be None")

    router = APIRouter(prefix="/api", tags=["info"])

    @router.get("/info")
    def api_release_info() -> JSONResponse:
        """Return release identity together with runtime host details.

        Returns:
            JSONResponse: Info payload; includes `features` when the release publishes any.
        """

        runtime_snapshot = runtime_provider.runtime_capture()
        payload: dict[str, object] = {
            "version": release_profile.version,
            "environment": release_profile.environment,
            "status": release_profile.status,
            "timestamp": runtime_snapshot.timestamp,
            "hostname": runtime_snapshot.hostname,
            "platform": runtime_snapshot.platform,
            "pythonVersion": runtime_snapshot.runtime_version,
        }
        if release_profile.feature_names:
            payload["features"] = list(release_profile.feature_names)
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    if release_profile.publishes_features:

        @router.get("/features")
        def api_release_features() -> JSONResponse:
            """Return the ordered feature descriptors shipped by the release.

            Returns:
                JSONResponse: Features payload with `version` and `newFeatures`.
            """

            payload = {
                "version": release_profile.version,
                "newFeatures": [feature.as_payload() for feature in release_profile.features],
            }
            return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router
