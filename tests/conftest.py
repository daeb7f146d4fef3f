"""Shared fixtures and call-recording fakes for fabric8-kube tests."""

from typing import Any

import pytest

from fabric8_kube.config import KubeClientConfig
from fabric8_kube.models.common import ConfigMapRecord, QuotaRecord
from fabric8_kube.utils.quantity import format_quantity

CLUSTER_URL = "https://api.myCluster.url:443/cluster"
TOKEN = "myToken"
USER_NAMESPACE = "myNamespace"


def make_config_map(
    data: dict[str, str] | None = None,
    labels: dict[str, str] | None = None,
) -> ConfigMapRecord:
    """Build an environments ConfigMap record."""
    return ConfigMapRecord(
        name="fabric8-environments",
        labels={"provider": "fabric8"} if labels is None else labels,
        data=(
            {
                "run": "name: run\nnamespace: my-run\norder: 1",
                "stage": "name: stage\nnamespace: my-stage\norder: 0",
            }
            if data is None
            else data
        ),
    )


def make_quota(hard: dict[str, float], used: dict[str, float]) -> QuotaRecord:
    """Build a compute-resources quota from float amounts, going through quantity text."""
    return QuotaRecord(
        name="compute-resources",
        hard={k: format_quantity(v) for k, v in hard.items()},
        used={k: format_quantity(v) for k, v in used.items()},
    )


DEFAULT_HARD = {"limits.cpu": 0.7, "limits.memory": 1024}
DEFAULT_USED = {"limits.cpu": 0.4, "limits.memory": 512}


class FakeClusterAPI:
    """Cluster API fake recording every request it receives.

    Quotas are looked up by namespace; a namespace without an entry has no quota.
    """

    def __init__(
        self,
        config_map: ConfigMapRecord | None = None,
        quotas: dict[str, QuotaRecord] | None = None,
    ) -> None:
        self.config_map = config_map if config_map is not None else make_config_map()
        self.quotas = quotas if quotas is not None else {}
        self.config_map_requests: list[tuple[str, str]] = []
        self.quota_requests: list[tuple[str, str]] = []

    def get_config_map(self, namespace: str, name: str) -> ConfigMapRecord:
        self.config_map_requests.append((namespace, name))
        return self.config_map

    def get_resource_quota(self, namespace: str, name: str) -> QuotaRecord | None:
        self.quota_requests.append((namespace, name))
        return self.quotas.get(namespace)


class FakeMetrics:
    def __init__(self, url: str, bearer_token: str) -> None:
        self.url = url
        self.bearer_token = bearer_token


class FakeMetricsGetter:
    """Metrics getter fake recording the URL and token it was asked for."""

    def __init__(self) -> None:
        self.metrics_url: str | None = None
        self.bearer_token: str | None = None
        self.calls = 0

    def get_metrics(self, metrics_url: str, bearer_token: str) -> FakeMetrics:
        self.metrics_url = metrics_url
        self.bearer_token = bearer_token
        self.calls += 1
        return FakeMetrics(metrics_url, bearer_token)


class FakeBuildConfigs:
    """Build config source fake returning a fixed list (or None)."""

    def __init__(self, configs: list[str] | None = None) -> None:
        self.configs = configs
        self.requested: list[str] = []

    def get_build_configs(self, space_id: str) -> list[str] | None:
        self.requested.append(space_id)
        return self.configs


@pytest.fixture
def config() -> KubeClientConfig:
    """Client configuration pointing at a fake cluster."""
    return KubeClientConfig(
        cluster_url=CLUSTER_URL,
        bearer_token=TOKEN,
        user_namespace=USER_NAMESPACE,
    )


@pytest.fixture
def cluster_api() -> FakeClusterAPI:
    """Cluster API fake with the default environments and a quota for my-run."""
    return FakeClusterAPI(quotas={"my-run": make_quota(DEFAULT_HARD, DEFAULT_USED)})


@pytest.fixture
def metrics_getter() -> FakeMetricsGetter:
    return FakeMetricsGetter()


@pytest.fixture
def build_configs() -> FakeBuildConfigs:
    return FakeBuildConfigs()


@pytest.fixture
def capabilities(
    cluster_api: FakeClusterAPI,
    metrics_getter: FakeMetricsGetter,
    build_configs: FakeBuildConfigs,
) -> dict[str, Any]:
    """All three capabilities as KubeClient keyword arguments."""
    return {
        "cluster_api": cluster_api,
        "metrics_getter": metrics_getter,
        "build_configs": build_configs,
    }


@pytest.fixture
def config_map_factory() -> Any:
    """Factory for environments ConfigMap records."""
    return make_config_map


@pytest.fixture
def quota_factory() -> Any:
    """Factory for compute-resources quota records."""
    return make_quota
