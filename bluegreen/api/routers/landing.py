"""Landing page router composition."""

from fastapi import APIRouter, status
from fastapi.responses import HTMLResponse

from bluegreen.domain import ReleaseProfile, RuntimeInfoPort

from ..landing_page import api_render_landing_page


def api_create_landing_router(release_profile: ReleaseProfile, runtime_provider: RuntimeInfoPort) -> APIRouter:
    """Create router serving the release landing page at `/`.

    Args:
        release_profile: Release identity rendered into the page.
        runtime_provider: Runtime info provider for timestamp and host name.

    Returns:
        APIRouter: Router exposing the landing page.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if release_profile is None:
        raise ValueError("release_profile must not be None")
    if runtime_provider is None:
        raise ValueError("runtime_provider must not be None")

    router = APIRouter(tags=["landing"])

    @router.get("/", response_class=HTMLResponse)
    def api_landing_page() -> HTMLResponse:
        """Render the landing page for the running release.

        Returns:
            HTMLResponse: Complete HTML document.
        """

        document = api_render_landing_page(
            release_profile=release_profile,
            runtime_snapshot=runtime_provider.runtime_capture(),
        )
        return HTMLResponse(content=document, status_code=status.HTTP_200_OK)

    return router
