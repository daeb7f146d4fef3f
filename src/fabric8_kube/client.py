"""KubeClient: environments, quotas and spaces of a fabric8 tenant.

The client is ready once constructed: the metrics URL has been derived and
the environment catalog read from the ``fabric8-environments`` ConfigMap in
the user namespace. Every other operation is a fresh read through the
injected capabilities.

A KubeClient is not modified after construction, so it may be shared
between threads provided the capabilities it was given are thread-safe.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fabric8_kube.domains.environments.catalog import build_catalog, ordered_environments
from fabric8_kube.domains.environments.client import QuotaResolver
from fabric8_kube.domains.environments.models import (
    EnvironmentCatalog,
    EnvironmentQuota,
    SimpleEnvironment,
)
from fabric8_kube.domains.metrics.endpoint import derive_endpoints
from fabric8_kube.domains.spaces.client import SpaceClient
from fabric8_kube.utils.labels import Fabric8Names

if TYPE_CHECKING:
    from fabric8_kube.config import KubeClientConfig
    from fabric8_kube.domains.spaces.models import Space
    from fabric8_kube.interfaces import (
        BuildConfigSource,
        ClusterAPI,
        MetricsGetter,
        MetricsInterface,
    )
    from fabric8_kube.models.common import ClusterEndpoints

logger = logging.getLogger(__name__)


class KubeClient:
    """Read-only view of a tenant's environments, quotas and spaces."""

    def __init__(
        self,
        config: KubeClientConfig,
        cluster_api: ClusterAPI | None = None,
        metrics_getter: MetricsGetter | None = None,
        build_configs: BuildConfigSource | None = None,
    ) -> None:
        """Create a ready client.

        Capabilities left unset default to the kubernetes/httpx backed
        implementations in :mod:`fabric8_kube.clients`.

        Raises:
            ClusterURLFormatError: If the cluster URL has no ``api.`` host.
            CatalogError: If the environments ConfigMap is invalid.
        """
        endpoints = derive_endpoints(config.cluster_url)

        if cluster_api is None or build_configs is None:
            from fabric8_kube.clients.cluster import (
                K8sClusterAPI,
                OpenShiftBuildConfigs,
                build_api_client,
            )

            api_client = build_api_client(config)
            if cluster_api is None:
                cluster_api = K8sClusterAPI(api_client)
            if build_configs is None:
                build_configs = OpenShiftBuildConfigs(api_client, config.user_namespace)
        if metrics_getter is None:
            from fabric8_kube.clients.metrics import HttpMetricsGetter

            metrics_getter = HttpMetricsGetter()

        config_map = cluster_api.get_config_map(
            config.user_namespace, Fabric8Names.ENVIRONMENTS_CONFIG_MAP
        )
        catalog = build_catalog(config_map)

        self._config = config
        self._endpoints = endpoints
        self._catalog = catalog
        self._metrics_getter = metrics_getter
        self._quotas = QuotaResolver(cluster_api)
        self._spaces = SpaceClient(build_configs)

        logger.info(
            f"KubeClient ready for {config.cluster_url} "
            f"({len(catalog)} environment(s) in {config.user_namespace})"
        )

    @property
    def config(self) -> KubeClientConfig:
        """Configuration the client was built from."""
        return self._config

    @property
    def endpoints(self) -> ClusterEndpoints:
        """Cluster API and metrics service URLs."""
        return self._endpoints

    @property
    def environments(self) -> EnvironmentCatalog:
        """Environment catalog keyed by environment name."""
        return self._catalog

    def get_environment(self, name: str) -> EnvironmentQuota:
        """Get the current CPU and memory quota of an environment.

        Raises:
            EnvironmentNotFoundError: If no environment has this name.
            QuotaNotFoundError: If the environment's namespace has no quota.
        """
        return self._quotas.resolve(self._catalog, name)

    def get_environments(self) -> list[SimpleEnvironment]:
        """Get every environment with its quota, in presentation order."""
        return [
            SimpleEnvironment(name=env.name, quota=self._quotas.resolve(self._catalog, env.name))
            for env in ordered_environments(self._catalog)
        ]

    def get_space(self, space_id: str) -> Space:
        """Get a space and its applications."""
        return self._spaces.get_space(space_id)

    def get_metrics(self) -> MetricsInterface:
        """Open a handle on the cluster metrics service."""
        return self._metrics_getter.get_metrics(
            self._endpoints.metrics_url, self._config.bearer_token
        )
