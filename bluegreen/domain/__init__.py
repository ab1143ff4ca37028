"""Domain models used across application layer boundaries."""

from .interfaces import RuntimeInfoPort
from .models import FeatureDescriptor, ReleaseProfile, ReleaseTheme, RuntimeSnapshot
from .releases import (
    RELEASE_BLUE,
    RELEASE_GREEN,
    UnknownReleaseError,
    domain_get_release_profile,
    domain_list_release_names,
)
from .runtime import SystemRuntimeInfoProvider, domain_utc_timestamp

__all__ = [
    "FeatureDescriptor",
    "RELEASE_BLUE",
    "RELEASE_GREEN",
    "ReleaseProfile",
    "ReleaseTheme",
    "RuntimeInfoPort",
    "RuntimeSnapshot",
    "SystemRuntimeInfoProvider",
    "UnknownReleaseError",
    "domain_get_release_profile",
    "domain_list_release_names",
    "domain_utc_timestamp",
]
