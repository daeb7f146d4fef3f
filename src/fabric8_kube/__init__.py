"""Environment catalog and quota resolution for fabric8 tenants on OpenShift."""

__version__ = "0.1.0"

from fabric8_kube.client import KubeClient  # noqa: E402
from fabric8_kube.config import KubeClientConfig  # noqa: E402

__all__ = [
    "__version__",
    "KubeClient",
    "KubeClientConfig",
]
