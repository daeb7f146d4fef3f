"""Capabilities the KubeClient depends on but does not implement.

Production implementations live in :mod:`fabric8_kube.clients`; tests supply
their own. Implementations are expected to be safe to call from several
threads if the KubeClient is shared between threads.
"""

from __future__ import annotations

from typing import Protocol

from fabric8_kube.models.common import ConfigMapRecord, QuotaRecord


class ClusterAPI(Protocol):
    """Read access to namespaced cluster objects."""

    def get_config_map(self, namespace: str, name: str) -> ConfigMapRecord:
        """Return the labels and data of a ConfigMap.

        Raises:
            Exception: Whatever the transport raises when the read fails.
        """
        ...

    def get_resource_quota(self, namespace: str, name: str) -> QuotaRecord | None:
        """Return a ResourceQuota, or None if it does not exist."""
        ...


class MetricsInterface(Protocol):
    """Handle on the cluster metrics service."""

    @property
    def url(self) -> str:
        """Base URL of the metrics service."""
        ...

    @property
    def bearer_token(self) -> str:
        """Token used to authenticate metrics queries."""
        ...


class MetricsGetter(Protocol):
    """Factory for metrics handles."""

    def get_metrics(self, metrics_url: str, bearer_token: str) -> MetricsInterface:
        """Open a metrics handle for the given service."""
        ...


class BuildConfigSource(Protocol):
    """Lists the build configurations that make up a space."""

    def get_build_configs(self, space_id: str) -> list[str] | None:
        """Return the build config names of a space; None or [] when it has none."""
        ...
