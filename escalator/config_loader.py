"""
Configuration Loader
Builds the escalator configuration from environment variables
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from escalator.config_validator import ConfigValidator
from escalator.openstack import FLAVOR_ALTERNATE_ENV
from escalator.platforms import Platform

logger = logging.getLogger(__name__)


@dataclass
class EscalatorConfig:
    """Escalator configuration"""
    platform: Optional[Platform] = None
    openstack_flavor_alternate: Optional[str] = None
    log_level: str = "INFO"
    log_format: str = "json"
    enable_metrics: bool = True


def load_config(environ: Optional[Mapping[str, str]] = None) -> EscalatorConfig:
    """Load configuration from environment variables"""
    env = os.environ if environ is None else environ

    config = EscalatorConfig(
        platform=ConfigValidator.validate_platform(env.get("PLATFORM")),
        openstack_flavor_alternate=ConfigValidator.validate_flavor_alternate(
            env.get(FLAVOR_ALTERNATE_ENV)
        ),
        log_level=ConfigValidator.validate_log_level(env.get("LOG_LEVEL", "INFO")),
        log_format=ConfigValidator.validate_log_format(env.get("LOG_FORMAT", "json")),
        enable_metrics=ConfigValidator.validate_bool(
            env.get("ENABLE_METRICS", "true"), "ENABLE_METRICS"
        ),
    )

    logger.debug(
        f"Configuration loaded: platform={config.platform.value if config.platform else 'auto'}, "
        f"openstack_flavor_alternate={'set' if config.openstack_flavor_alternate else 'unset'}, "
        f"metrics={config.enable_metrics}"
    )
    return config


class ConfigLoader:
    """Load configuration once and hand out the cached copy"""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self.environ = environ
        self.config: Optional[EscalatorConfig] = None

    def load_config(self) -> EscalatorConfig:
        self.config = load_config(self.environ)
        return self.config

    def get_config(self) -> EscalatorConfig:
        """Get current configuration"""
        if not self.config:
            return self.load_config()
        return self.config


# Global config loader instance
_config_loader: Optional[ConfigLoader] = None


def get_config_loader() -> ConfigLoader:
    """Get or create global config loader instance"""
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader()
    return _config_loader
