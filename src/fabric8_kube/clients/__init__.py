"""Production implementations of the KubeClient capabilities."""

from fabric8_kube.clients.cluster import (
    BUILD_CONFIG,
    K8sClusterAPI,
    OpenShiftBuildConfigs,
    ResourceDefinition,
    build_api_client,
)
from fabric8_kube.clients.metrics import HttpMetricsGetter, MetricsClient

__all__ = [
    "BUILD_CONFIG",
    "K8sClusterAPI",
    "OpenShiftBuildConfigs",
    "ResourceDefinition",
    "build_api_client",
    "HttpMetricsGetter",
    "MetricsClient",
]
