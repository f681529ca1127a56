"""
Platform Detection
Works out which platform a cluster runs on when the caller does not say
"""

import logging
from typing import Optional

from kubernetes import client, config
from kubernetes.client.rest import ApiException

from escalator.errors import UnsupportedPlatformError
from escalator.platforms import Platform, parse_platform

logger = logging.getLogger(__name__)

INFRASTRUCTURE_GROUP = "config.openshift.io"
INFRASTRUCTURE_VERSION = "v1"
INFRASTRUCTURE_PLURAL = "infrastructures"
INFRASTRUCTURE_NAME = "cluster"

# Node spec.providerID scheme -> platform
PROVIDER_ID_PREFIXES = {
    "aws://": Platform.AWS,
    "azure://": Platform.AZURE,
    "gce://": Platform.GCP,
    "nutanix://": Platform.NUTANIX,
    "openstack://": Platform.OPENSTACK,
}


def load_kubernetes_config():
    """Load in-cluster config, falling back to the local kubeconfig"""
    try:
        config.load_incluster_config()
        logger.info("Loaded in-cluster Kubernetes config")
    except config.ConfigException:
        config.load_kube_config()
        logger.info("Loaded local Kubernetes config")


class PlatformDetector:
    """Detect the cluster platform from the Infrastructure object or node provider IDs"""

    def __init__(self, custom_objects_api=None, core_v1=None):
        if custom_objects_api is None or core_v1 is None:
            load_kubernetes_config()
        self.custom_objects_api = custom_objects_api or client.CustomObjectsApi()
        self.core_v1 = core_v1 or client.CoreV1Api()

    def detect_from_infrastructure(self) -> Optional[Platform]:
        """Read status.platformStatus.type from the cluster Infrastructure object"""
        try:
            infrastructure = self.custom_objects_api.get_cluster_custom_object(
                INFRASTRUCTURE_GROUP,
                INFRASTRUCTURE_VERSION,
                INFRASTRUCTURE_PLURAL,
                INFRASTRUCTURE_NAME,
            )
        except ApiException as e:
            if e.status == 404:
                logger.debug("Infrastructure object not found")
            else:
                logger.warning(f"Failed to read Infrastructure object: {e}")
            return None

        status = infrastructure.get("status") or {}
        platform_type = (status.get("platformStatus") or {}).get("type") or status.get("platform")
        if not platform_type:
            return None

        try:
            return parse_platform(platform_type)
        except UnsupportedPlatformError:
            logger.warning(f"Cluster platform {platform_type} has no escalation pipeline")
            return None

    def detect_from_nodes(self) -> Optional[Platform]:
        """Match node spec.providerID against known provider schemes"""
        try:
            nodes = self.core_v1.list_node()
        except ApiException as e:
            logger.warning(f"Failed to list nodes: {e}")
            return None

        for node in nodes.items:
            provider_id = (node.spec.provider_id if node.spec else None) or ""
            for prefix, platform in PROVIDER_ID_PREFIXES.items():
                if provider_id.startswith(prefix):
                    return platform

        return None

    def detect(self) -> Optional[Platform]:
        """Detect the platform, None when nothing is recognised"""
        platform = self.detect_from_infrastructure() or self.detect_from_nodes()
        if platform:
            logger.info(f"Detected platform: {platform.value}")
        else:
            logger.warning("Could not detect platform from cluster")
        return platform
