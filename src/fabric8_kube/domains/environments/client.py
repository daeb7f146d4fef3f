"""Environment quota resolution."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fabric8_kube.domains.environments.models import (
    EnvironmentCatalog,
    EnvironmentQuota,
    ResourceQuantity,
)
from fabric8_kube.utils.errors import EnvironmentNotFoundError, QuotaNotFoundError
from fabric8_kube.utils.labels import Fabric8Names
from fabric8_kube.utils.quantity import parse_quantity

if TYPE_CHECKING:
    from fabric8_kube.interfaces import ClusterAPI

logger = logging.getLogger(__name__)


def _quantity(resources: dict[str, str], key: str) -> float:
    """Read one resource from a quota map; a missing key counts as zero."""
    raw = resources.get(key)
    if raw is None:
        return 0.0
    return parse_quantity(raw)


class QuotaResolver:
    """Resolves the live CPU and memory quota of catalog environments."""

    def __init__(self, cluster_api: ClusterAPI) -> None:
        self._cluster_api = cluster_api

    def resolve(self, catalog: EnvironmentCatalog, name: str) -> EnvironmentQuota:
        """Fetch the compute quota of an environment's namespace.

        Args:
            catalog: Environment catalog to look the name up in.
            name: Environment name.

        Returns:
            A freshly built EnvironmentQuota.

        Raises:
            EnvironmentNotFoundError: If the catalog has no such environment.
            QuotaNotFoundError: If the namespace has no compute-resources quota.
            QuantityFormatError: If a quota value is not a valid quantity.
        """
        env = catalog.get(name)
        if env is None:
            raise EnvironmentNotFoundError(name)

        logger.debug(f"Reading quota {Fabric8Names.COMPUTE_QUOTA} for '{name}' in {env.namespace}")
        quota = self._cluster_api.get_resource_quota(env.namespace, Fabric8Names.COMPUTE_QUOTA)
        if quota is None:
            raise QuotaNotFoundError(Fabric8Names.COMPUTE_QUOTA, env.namespace)

        return EnvironmentQuota(
            cpucores=ResourceQuantity(
                quota=_quantity(quota.hard, Fabric8Names.LIMITS_CPU),
                used=_quantity(quota.used, Fabric8Names.LIMITS_CPU),
            ),
            memory=ResourceQuantity(
                quota=_quantity(quota.hard, Fabric8Names.LIMITS_MEMORY),
                used=_quantity(quota.used, Fabric8Names.LIMITS_MEMORY),
            ),
        )
