"""Common Pydantic models shared across fabric8-kube domains."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ConfigMapRecord(BaseModel):
    """Labels and data of a ConfigMap, as returned by the cluster API."""

    model_config = ConfigDict(frozen=True)

    name: str | None = Field(None, description="ConfigMap name")
    labels: dict[str, str] = Field(default_factory=dict, description="ConfigMap labels")
    data: dict[str, str] = Field(default_factory=dict, description="ConfigMap data entries")

    @classmethod
    def from_k8s_config_map(cls, config_map: Any) -> "ConfigMapRecord":
        """Create from a kubernetes V1ConfigMap object."""
        metadata = getattr(config_map, "metadata", None)
        labels = getattr(metadata, "labels", None)
        if labels is not None and not isinstance(labels, dict):
            labels = dict(labels)
        data = getattr(config_map, "data", None)
        if data is not None and not isinstance(data, dict):
            data = dict(data)
        return cls(
            name=getattr(metadata, "name", None),
            labels=labels or {},
            data=data or {},
        )


class QuotaRecord(BaseModel):
    """Hard limits and current usage of a ResourceQuota.

    Values are left as quantity strings; conversion happens in the resolver.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="ResourceQuota name")
    hard: dict[str, str] = Field(default_factory=dict, description="Hard limits by resource")
    used: dict[str, str] = Field(default_factory=dict, description="Current usage by resource")

    @classmethod
    def from_k8s_resource_quota(cls, quota: Any) -> "QuotaRecord":
        """Create from a kubernetes V1ResourceQuota object."""
        status = getattr(quota, "status", None)
        return cls(
            name=quota.metadata.name,
            hard={k: str(v) for k, v in (getattr(status, "hard", None) or {}).items()},
            used={k: str(v) for k, v in (getattr(status, "used", None) or {}).items()},
        )


class ClusterEndpoints(BaseModel):
    """Addresses of the cluster API and of its metrics service."""

    model_config = ConfigDict(frozen=True)

    api_url: str = Field(..., description="Cluster API base URL")
    metrics_url: str = Field(..., description="Metrics service base URL")
