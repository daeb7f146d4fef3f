"""Derive the metrics service address from the cluster API address.

OpenShift Online clusters expose their API at ``https://api.<domain>`` and
the matching Hawkular metrics service at ``https://metrics.<domain>``.
"""

from __future__ import annotations

from urllib.parse import urlsplit

from fabric8_kube.models.common import ClusterEndpoints
from fabric8_kube.utils.errors import ClusterURLFormatError

API_HOST_PREFIX = "api."
METRICS_HOST_PREFIX = "metrics."
ALLOWED_SCHEMES = ("https", "http")


def derive_metrics_url(api_url: str) -> str:
    """Build the metrics service URL for a cluster API URL.

    The port, path, query and fragment are dropped; the host case is kept::

        >>> derive_metrics_url("https://api.myCluster.url:443/cluster")
        'https://metrics.myCluster.url'

    Raises:
        ClusterURLFormatError: If the URL has no scheme or host, or its host
            does not start with ``api.``.
    """
    parts = urlsplit(api_url.strip())
    if parts.scheme.lower() not in ALLOWED_SCHEMES:
        raise ClusterURLFormatError(api_url, "scheme must be https or http")

    # netloc keeps the original case, hostname does not
    host = parts.netloc.rpartition("@")[2]
    if ":" in host:
        host = host.split(":", 1)[0]
    if not host.lower().startswith(API_HOST_PREFIX):
        raise ClusterURLFormatError(api_url, f"host must start with '{API_HOST_PREFIX}'")

    domain = host[len(API_HOST_PREFIX) :]
    if not domain:
        raise ClusterURLFormatError(api_url, "missing cluster domain")

    return f"{parts.scheme}://{METRICS_HOST_PREFIX}{domain}"


def derive_endpoints(api_url: str) -> ClusterEndpoints:
    """Pair the cluster API URL with its derived metrics URL."""
    return ClusterEndpoints(api_url=api_url, metrics_url=derive_metrics_url(api_url))
