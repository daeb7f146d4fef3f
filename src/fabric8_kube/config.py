"""Configuration for the fabric8 Kubernetes client."""

from __future__ import annotations

from enum import Enum

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Logging level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class KubeClientConfig(BaseSettings):
    """Settings the KubeClient is constructed from.

    Loaded from environment variables with FABRIC8_KUBE_ prefix or from a
    .env file; explicit keyword arguments take precedence.
    """

    model_config = SettingsConfigDict(
        env_prefix="FABRIC8_KUBE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    cluster_url: str = Field(
        ...,
        description="Cluster API base URL, e.g. https://api.starter-us-east-2.openshift.com",
    )
    bearer_token: str = Field(
        ...,
        description="OAuth bearer token used for the cluster API and metrics",
        repr=False,
    )
    user_namespace: str = Field(
        ...,
        description="Namespace holding the fabric8-environments ConfigMap",
    )
    verify_ssl: bool = Field(
        default=True,
        description="Verify TLS certificates of the cluster API",
    )
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level",
    )

    @field_validator("cluster_url", "bearer_token", "user_namespace")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

