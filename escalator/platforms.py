"""
Supported Platforms
Platform discriminator and the provider-spec field each platform sizes by
"""

from enum import Enum
from typing import Dict, Union

from escalator.errors import UnsupportedPlatformError


class Platform(Enum):
    """Cloud platforms the escalation engine has pipelines for"""
    AWS = "AWS"
    AZURE = "Azure"
    GCP = "GCP"
    NUTANIX = "Nutanix"
    OPENSTACK = "OpenStack"


# Provider spec key carrying the size value for each platform
SIZE_FIELDS: Dict[Platform, str] = {
    Platform.AWS: "instanceType",
    Platform.AZURE: "vmSize",
    Platform.GCP: "machineType",
    Platform.NUTANIX: "vcpuSockets",
    Platform.OPENSTACK: "flavor",
}

# Extra spellings seen in node labels and provider IDs
_ALIASES = {
    "gce": Platform.GCP,
    "google": Platform.GCP,
    "amazon": Platform.AWS,
}


def parse_platform(value: Union[str, Platform]) -> Platform:
    """Resolve a platform name case-insensitively"""
    if isinstance(value, Platform):
        return value
    if not isinstance(value, str) or not value.strip():
        raise UnsupportedPlatformError(value)

    key = value.strip().lower()
    for platform in Platform:
        if platform.value.lower() == key or platform.name.lower() == key:
            return platform
    if key in _ALIASES:
        return _ALIASES[key]

    raise UnsupportedPlatformError(value)


def size_field(platform: Platform) -> str:
    """Get the provider spec key holding the size for a platform"""
    return SIZE_FIELDS[platform]
