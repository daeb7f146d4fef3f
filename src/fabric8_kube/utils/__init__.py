"""Utility functions and helpers for fabric8-kube."""

from fabric8_kube.utils.errors import (
    CatalogError,
    ClusterURLFormatError,
    EnvironmentNotFoundError,
    Fabric8Error,
    MalformedEntryError,
    MissingFieldError,
    MissingProviderLabelError,
    NotFoundError,
    QuantityFormatError,
    QuotaNotFoundError,
)
from fabric8_kube.utils.labels import Fabric8Labels, Fabric8Names
from fabric8_kube.utils.quantity import (
    FLOAT_EPSILON,
    format_quantity,
    parse_quantity,
    quantities_equal,
)

__all__ = [
    # Errors
    "Fabric8Error",
    "CatalogError",
    "MissingProviderLabelError",
    "MalformedEntryError",
    "MissingFieldError",
    "QuantityFormatError",
    "ClusterURLFormatError",
    "NotFoundError",
    "EnvironmentNotFoundError",
    "QuotaNotFoundError",
    # Labels and names
    "Fabric8Labels",
    "Fabric8Names",
    # Quantities
    "FLOAT_EPSILON",
    "parse_quantity",
    "format_quantity",
    "quantities_equal",
]
