"""
Escalation Engine
Routes a platform and its current size to the matching provider pipeline
"""

import copy
import logging
from typing import Any, Callable, Dict, Iterator, Mapping, Optional, Union

from escalator import aws, azure, gcp, nutanix, openstack
from escalator.config_loader import EscalatorConfig, load_config
from escalator.errors import (
    EscalationError,
    InstanceTypeNotSupportedError,
    MissingInstanceSizeError,
    UnsupportedPlatformError,
)
from escalator.logging_config import get_logger
from escalator.metrics import EscalationMetrics, get_default_metrics
from escalator.platforms import Platform, parse_platform, size_field

logger = logging.getLogger(__name__)

# Pipelines that need nothing but the current value
PIPELINES: Dict[Platform, Callable[[Any], Any]] = {
    Platform.AWS: aws.next_instance_type,
    Platform.AZURE: azure.next_vm_size,
    Platform.GCP: gcp.next_machine_type,
    Platform.NUTANIX: nutanix.next_vcpu_sockets,
}


def escalate(platform: Union[str, Platform], current: Any,
             openstack_flavor_alternate: Optional[str] = None) -> Any:
    """
    Compute the next larger size for ``current`` on ``platform``.

    ``current`` is the instance type, VM size or machine type string for
    AWS, Azure and GCP, the vCPU socket count for Nutanix and the current
    flavor for OpenStack. OpenStack has no successor to compute, so the
    caller must pass the alternate flavor.

    Raises an EscalationError subclass when there is no next size.
    """
    platform = parse_platform(platform)

    if platform is Platform.OPENSTACK:
        return openstack.next_flavor(current, openstack_flavor_alternate)

    next_size = PIPELINES[platform](current)
    logger.debug(f"{platform.value}: {current} -> {next_size}")
    return next_size


class InstanceSizeEscalator:
    """Escalation service carrying configuration and metrics"""

    def __init__(self, config: Optional[EscalatorConfig] = None,
                 metrics: Optional[EscalationMetrics] = None):
        self.config = config if config is not None else load_config()
        if metrics is None and self.config.enable_metrics:
            metrics = get_default_metrics()
        self.metrics = metrics

    def resolve_platform(self, platform: Union[str, Platform, None] = None) -> Platform:
        """Use the given platform, falling back to the configured one"""
        if platform is None:
            platform = self.config.platform
        if platform is None:
            raise UnsupportedPlatformError(detail="no platform given and PLATFORM is not set")
        return parse_platform(platform)

    def escalate(self, current: Any, platform: Union[str, Platform, None] = None) -> Any:
        """Get the next size, recording the outcome"""
        resolved = self.resolve_platform(platform)
        try:
            next_size = escalate(resolved, current, self.config.openstack_flavor_alternate)
        except EscalationError as e:
            self._logger(resolved).warning(f"Cannot escalate {resolved.value} size {current!r}: {e}")
            self._record(resolved, e.kind)
            raise

        self._record(resolved, None)
        return next_size

    def ladder(self, current: Any, platform: Union[str, Platform, None] = None,
               limit: int = 10) -> Iterator[Any]:
        """
        Yield successive sizes until the ceiling or ``limit`` steps.

        Reaching the ceiling ends the ladder; any other failure, including
        a malformed starting value, is raised.
        """
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")

        resolved = self.resolve_platform(platform)
        size = current
        for _ in range(limit):
            try:
                size = self.escalate(size, resolved)
            except InstanceTypeNotSupportedError:
                return
            yield size
            if resolved is Platform.OPENSTACK:
                # the alternate flavor is the only step there is
                return

    def increase_provider_spec_instance_size(
        self,
        provider_spec: Mapping[str, Any],
        platform: Union[str, Platform, None] = None,
    ) -> Dict[str, Any]:
        """
        Return a copy of a provider spec value with its size increased.

        The size lives in ``instanceType`` (AWS), ``vmSize`` (Azure),
        ``machineType`` (GCP), ``vcpuSockets`` (Nutanix) or ``flavor``
        (OpenStack). The given mapping is left untouched.
        """
        resolved = self.resolve_platform(platform)
        field = size_field(resolved)

        current = provider_spec.get(field)
        if current is None or current == "":
            self._record(resolved, MissingInstanceSizeError.kind)
            raise MissingInstanceSizeError(
                detail=f"provider spec has no {field}: instance size is missing"
            )

        updated = copy.deepcopy(dict(provider_spec))
        updated[field] = self.escalate(current, resolved)

        self._logger(resolved).info(f"Increased {resolved.value} {field} from {current} to {updated[field]}")
        return updated

    def _logger(self, platform: Platform):
        return get_logger(__name__, {"platform": platform.value})

    def _record(self, platform: Platform, kind: Optional[str]):
        if self.metrics is None:
            return
        if kind is None:
            self.metrics.record_success(platform.value)
        else:
            self.metrics.record_failure(platform.value, kind)
