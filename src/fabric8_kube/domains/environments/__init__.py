"""Environments domain - deployment tiers and their quotas."""

from fabric8_kube.domains.environments.catalog import build_catalog, ordered_environments
from fabric8_kube.domains.environments.client import QuotaResolver
from fabric8_kube.domains.environments.models import (
    Environment,
    EnvironmentCatalog,
    EnvironmentQuota,
    ResourceQuantity,
    SimpleEnvironment,
)

__all__ = [
    "build_catalog",
    "ordered_environments",
    "QuotaResolver",
    "Environment",
    "EnvironmentCatalog",
    "EnvironmentQuota",
    "ResourceQuantity",
    "SimpleEnvironment",
]
