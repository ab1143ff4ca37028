"""Release profile catalog for the blue and green deployments."""

from __future__ import annotations

from typing import Final

from .models import FeatureDescriptor, ReleaseProfile, ReleaseTheme


class UnknownReleaseError(ValueError):
    """Raised when a release name does not match any known profile."""


RELEASE_BLUE: Final[ReleaseProfile] = ReleaseProfile(
    release_name="v1",
    version="1.0",
    environment="blue",
    status="production",
    summary="This is the current production environment running the stable Version 1.0 of the application.",
    theme=ReleaseTheme(
        gradient_start="#1e3c72",
        gradient_end="#2a5298",
        badge_color="#4CAF50",
        environment_icon="🔵",
    ),
)

RELEASE_GREEN: Final[ReleaseProfile] = ReleaseProfile(
    release_name="v2",
    version="2.0",
    environment="green",
    status="staging",
    summary="This is the staging environment running the new Version 2.0 with exciting features!",
    theme=ReleaseTheme(
        gradient_start="#11998e",
        gradient_end="#38ef7d",
        badge_color="#FF9800",
        environment_icon="🟢",
    ),
    highlights=(
        "🎨 Refreshed UI with modern design",
        "⚡ Improved performance",
        "🔒 Enhanced security features",
        "📊 Better analytics tracking",
        "🐛 Critical bug fixes",
    ),
    feature_names=(
        "Refreshed UI",
        "Improved performance",
        "Enhanced security",
        "Better analytics",
        "Bug fixes",
    ),
    features=(
        FeatureDescriptor(name="Modern UI", description="Complete redesign with modern aesthetics"),
        FeatureDescriptor(name="Performance Boost", description="50% faster load times"),
        FeatureDescriptor(name="Advanced Analytics", description="Real-time insights and reporting"),
    ),
)

_RELEASES_BY_NAME: Final[dict[str, ReleaseProfile]] = {
    RELEASE_BLUE.release_name: RELEASE_BLUE,
    RELEASE_GREEN.release_name: RELEASE_GREEN,
}


def domain_get_release_profile(release_name: str) -> ReleaseProfile:
    """Resolve a release profile by release key.

    Args:
        release_name: Release key (`v1`, `v2`), case-insensitive.

    Returns:
        ReleaseProfile: Matching immutable release profile.

    Raises:
        UnknownReleaseError: Raised when no profile matches the given name.
    """

    normalized_name = release_name.strip().lower()
    try:
        return _RELEASES_BY_NAME[normalized_name]
    except KeyError as error:
        raise UnknownReleaseError(
            f"unknown release={release_name!r}; expected one of {sorted(_RELEASES_BY_NAME)}"
        ) from error


def domain_list_release_names() -> tuple[str, ...]:
    """Return the supported release keys in version order."""

    return (RELEASE_BLUE.release_name, RELEASE_GREEN.release_name)
