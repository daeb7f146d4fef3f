"""Pydantic models for deployment environments and their quotas."""

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field


class Environment(BaseModel):
    """A deployment tier (e.g. run, stage) backed by its own namespace."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Environment name")
    namespace: str = Field(..., description="Namespace the environment deploys into")
    order: int = Field(..., description="Presentation order")


# Environment name -> Environment, read-only once built
EnvironmentCatalog = Mapping[str, Environment]


class ResourceQuantity(BaseModel):
    """Quota and usage of a single resource kind."""

    quota: float = Field(0.0, description="Hard limit")
    used: float = Field(0.0, description="Current usage")


class EnvironmentQuota(BaseModel):
    """CPU and memory quota of an environment."""

    cpucores: ResourceQuantity = Field(..., description="CPU limits, in cores")
    memory: ResourceQuantity = Field(..., description="Memory limits, in bytes")


class SimpleEnvironment(BaseModel):
    """An environment name together with its resolved quota."""

    name: str = Field(..., description="Environment name")
    quota: EnvironmentQuota
