"""
Configuration Validator
Validates environment variables before they reach the escalation engine
"""

import logging
from typing import Optional

from escalator.errors import UnsupportedPlatformError
from escalator.platforms import Platform, parse_platform

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("json", "structured", "text")

# Nova limits flavor names to 255 characters
MAX_FLAVOR_NAME_LENGTH = 255


class ConfigValidator:
    """Validate configuration values"""

    @staticmethod
    def validate_platform(value: Optional[str]) -> Optional[Platform]:
        """Validate platform name, empty means not configured"""
        if value is None or not value.strip():
            return None
        try:
            return parse_platform(value)
        except UnsupportedPlatformError as e:
            supported = ", ".join(p.value for p in Platform)
            raise ValueError(f"Invalid PLATFORM: {value}. Must be one of {supported}") from e

    @staticmethod
    def validate_flavor_alternate(value: Optional[str]) -> Optional[str]:
        """Validate the OpenStack alternate flavor, empty means not configured"""
        if value is None or not value.strip():
            return None
        value = value.strip()
        if len(value) > MAX_FLAVOR_NAME_LENGTH:
            raise ValueError(
                f"OPENSTACK_CONTROLPLANE_FLAVOR_ALTERNATE too long (max {MAX_FLAVOR_NAME_LENGTH} chars)"
            )
        return value

    @staticmethod
    def validate_log_level(value: str) -> str:
        """Validate log level"""
        level = (value or "").strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid LOG_LEVEL: {value}. Must be one of {', '.join(LOG_LEVELS)}")
        return level

    @staticmethod
    def validate_log_format(value: str) -> str:
        """Validate log format"""
        fmt = (value or "").strip().lower()
        if fmt not in LOG_FORMATS:
            raise ValueError(f"Invalid LOG_FORMAT: {value}. Must be one of {', '.join(LOG_FORMATS)}")
        return fmt

    @staticmethod
    def validate_bool(value: str, name: str) -> bool:
        """Validate a true/false flag"""
        normalized = (value or "").strip().lower()
        if normalized in ("true", "1", "yes"):
            return True
        if normalized in ("false", "0", "no"):
            return False
        raise ValueError(f"Invalid {name}: {value}. Must be true or false")
