"""HTTP handle on the cluster metrics service."""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class MetricsClient:
    """Connection details for the metrics service, with a lazily opened HTTP client.

    Time-series queries are issued by callers through :attr:`http`.
    """

    def __init__(self, metrics_url: str, bearer_token: str, timeout: float = 30.0) -> None:
        self._url = metrics_url
        self._bearer_token = bearer_token
        self._timeout = timeout
        self._http: httpx.Client | None = None

    @property
    def url(self) -> str:
        return self._url

    @property
    def bearer_token(self) -> str:
        return self._bearer_token

    @property
    def http(self) -> httpx.Client:
        """HTTP client bound to the metrics URL and authenticated with the token."""
        if self._http is None:
            self._http = httpx.Client(
                base_url=self._url,
                headers={"Authorization": f"Bearer {self._bearer_token}"},
                timeout=self._timeout,
            )
        return self._http

    def close(self) -> None:
        """Close the HTTP client if one was opened."""
        if self._http is not None:
            self._http.close()
            self._http = None

    def __enter__(self) -> MetricsClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class HttpMetricsGetter:
    """Creates MetricsClient handles."""

    def get_metrics(self, metrics_url: str, bearer_token: str) -> MetricsClient:
        logger.debug(f"Opening metrics handle for {metrics_url}")
        return MetricsClient(metrics_url, bearer_token)
