"""Shared data models."""

from fabric8_kube.models.common import ClusterEndpoints, ConfigMapRecord, QuotaRecord

__all__ = [
    "ClusterEndpoints",
    "ConfigMapRecord",
    "QuotaRecord",
]
