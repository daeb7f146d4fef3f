"""Spaces domain - applications grouped by space."""

from fabric8_kube.domains.spaces.client import SpaceClient
from fabric8_kube.domains.spaces.models import Space

__all__ = [
    "SpaceClient",
    "Space",
]
