"""Typed domain models shared across runtime layers.

This module provides immutable data contracts describing one application
release and the runtime values captured for each response.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FeatureDescriptor:
    """One shipped feature advertised by a release.

    Attributes:
        name: Short feature name.
        description: Human-readable feature summary.
        status: Delivery status marker.
    """

    name: str
    description: str
    status: str = "completed"

    def as_payload(self) -> dict[str, str]:
        """Return the JSON payload representation of the feature.

        Returns:
            dict[str, str]: Feature payload with name, description and status keys.
        """

        return {"name": self.name, "description": self.description, "status": self.status}


@dataclass(frozen=True)
class ReleaseTheme:
    """Landing page styling for one release.

    Attributes:
        gradient_start: First color of the page background gradient.
        gradient_end: Second color of the page background gradient.
        badge_color: Background color of the status badge.
        environment_icon: Emoji shown in front of the environment badge.
    """

    gradient_start: str
    gradient_end: str
    badge_color: str
    environment_icon: str


@dataclass(frozen=True)
class ReleaseProfile:
    """Static identity of one application release.

    Attributes:
        release_name: Release key used by configuration (`v1`, `v2`).
        version: Version string reported by every endpoint.
        environment: Deployment environment label (`blue`, `green`).
        status: Release status label (`production`, `staging`).
        summary: Landing page description sentence.
        theme: Landing page styling.
        highlights: Landing page bullet items for new functionality.
        feature_names: Ordered feature names reported by the info endpoint.
        features: Ordered feature descriptors reported by the features endpoint.
    """

    release_name: str
    version: str
    environment: str
    status: str
    summary: str
    theme: ReleaseTheme
    highlights: tuple[str, ...] = field(default_factory=tuple)
    feature_names: tuple[str, ...] = field(default_factory=tuple)
    features: tuple[FeatureDescriptor, ...] = field(default_factory=tuple)

    @property
    def environment_title(self) -> str:
        """Return the capitalized environment name, e.g. `Blue Environment`."""

        return f"{self.environment.capitalize()} Environment"

    @property
    def environment_label(self) -> str:
        """Return the badge text, e.g. `BLUE ENVIRONMENT`."""

        return self.environment_title.upper()

    @property
    def status_label(self) -> str:
        """Return the status badge text, e.g. `PRODUCTION`."""

        return self.status.upper()

    @property
    def page_title(self) -> str:
        """Return the landing page title, e.g. `Version 1.0 - Blue Environment`."""

        return f"Version {self.version} - {self.environment_title}"

    @property
    def publishes_features(self) -> bool:
        """Return whether the release exposes the features endpoint."""

        return bool(self.features)


@dataclass(frozen=True)
class RuntimeSnapshot:
    """Runtime-derived values captured once per response.

    Attributes:
        timestamp: Current UTC wall-clock time in ISO-8601 format.
        hostname: Host name of the serving process.
        platform: Operating-system platform identifier (`linux`, `darwin`, `win32`).
        runtime_version: Version string of the running Python interpreter.
    """

    timestamp: str
    hostname: str
    platform: str
    runtime_version: str
