"""Cluster API and build config access backed by the kubernetes client."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from kubernetes import client  # type: ignore[import-untyped]
from kubernetes.client import ApiException  # type: ignore[import-untyped]
from kubernetes.dynamic import DynamicClient  # type: ignore[import-untyped]

from fabric8_kube.models.common import ConfigMapRecord, QuotaRecord
from fabric8_kube.utils.labels import Fabric8Labels

if TYPE_CHECKING:
    from fabric8_kube.config import KubeClientConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResourceDefinition:
    """API group/version and kind of a resource read through the dynamic client."""

    api_version: str
    kind: str


BUILD_CONFIG = ResourceDefinition(api_version="build.openshift.io/v1", kind="BuildConfig")


def build_api_client(config: KubeClientConfig) -> client.ApiClient:
    """Create a kubernetes ApiClient for the configured cluster and token."""
    configuration = client.Configuration()
    configuration.host = config.cluster_url
    configuration.api_key = {"authorization": config.bearer_token}
    configuration.api_key_prefix = {"authorization": "Bearer"}
    configuration.verify_ssl = config.verify_ssl
    return client.ApiClient(configuration)


class K8sClusterAPI:
    """Reads ConfigMaps and ResourceQuotas through the core/v1 API."""

    def __init__(self, api_client: client.ApiClient) -> None:
        self._core_v1 = client.CoreV1Api(api_client)

    def get_config_map(self, namespace: str, name: str) -> ConfigMapRecord:
        """Read a ConfigMap.

        Raises:
            ApiException: If the read fails, including when it does not exist.
        """
        logger.debug(f"Reading ConfigMap {namespace}/{name}")
        config_map = self._core_v1.read_namespaced_config_map(name=name, namespace=namespace)
        return ConfigMapRecord.from_k8s_config_map(config_map)

    def get_resource_quota(self, namespace: str, name: str) -> QuotaRecord | None:
        """Read a ResourceQuota, returning None if it does not exist."""
        logger.debug(f"Reading ResourceQuota {namespace}/{name}")
        try:
            quota = self._core_v1.read_namespaced_resource_quota(name=name, namespace=namespace)
        except ApiException as e:
            if e.status == 404:
                return None
            raise
        return QuotaRecord.from_k8s_resource_quota(quota)


class OpenShiftBuildConfigs:
    """Lists the BuildConfigs of a space in the user namespace.

    Build configs belong to a space through their ``space`` label.
    """

    def __init__(self, api_client: client.ApiClient, namespace: str) -> None:
        self._api_client = api_client
        self._namespace = namespace
        self._dynamic_client: DynamicClient | None = None

    @property
    def dynamic_client(self) -> DynamicClient:
        """Dynamic client, created on first use since creation runs API discovery."""
        if self._dynamic_client is None:
            self._dynamic_client = DynamicClient(self._api_client)
        return self._dynamic_client

    def get_build_configs(self, space_id: str) -> list[str]:
        """Return the names of the space's build configs."""
        resource: Any = self.dynamic_client.resources.get(
            api_version=BUILD_CONFIG.api_version, kind=BUILD_CONFIG.kind
        )
        result = resource.get(
            namespace=self._namespace,
            label_selector=Fabric8Labels.space_selector(space_id),
        )
        names = [item.metadata.name for item in (result.items or [])]
        logger.debug(f"Found {len(names)} build config(s) for space '{space_id}'")
        return names
