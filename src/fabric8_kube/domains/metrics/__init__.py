"""Metrics domain - locating the cluster metrics service."""

from fabric8_kube.domains.metrics.endpoint import derive_endpoints, derive_metrics_url

__all__ = [
    "derive_endpoints",
    "derive_metrics_url",
]
