"""Build the environment catalog from the fabric8-environments ConfigMap.

Each data entry of the ConfigMap describes one environment as a small text
document with one ``field: value`` pair per line::

    name: Run
    namespace: my-run
    order: 1

Only ``name``, ``namespace`` and ``order`` are read; any other field is
ignored.
"""

from __future__ import annotations

import logging
from types import MappingProxyType

from fabric8_kube.domains.environments.models import Environment, EnvironmentCatalog
from fabric8_kube.models.common import ConfigMapRecord
from fabric8_kube.utils.errors import (
    MalformedEntryError,
    MissingFieldError,
    MissingProviderLabelError,
)
from fabric8_kube.utils.labels import Fabric8Labels

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "namespace", "order")


def parse_environment_document(key: str, document: str) -> dict[str, str]:
    """Split an environment document into its fields.

    Blank lines are skipped. The value is everything after the first colon,
    trimmed, so values may themselves contain colons.

    Args:
        key: ConfigMap data key the document was stored under.
        document: The document text.

    Raises:
        MalformedEntryError: If a line has no colon or an empty field name.
    """
    fields: dict[str, str] = {}
    for line in document.splitlines():
        if not line.strip():
            continue
        field, sep, value = line.partition(":")
        if not sep:
            raise MalformedEntryError(key, line)
        field = field.strip()
        if not field:
            raise MalformedEntryError(key, line, "empty field name")
        fields[field] = value.strip()
    return fields


def environment_from_document(key: str, document: str) -> Environment:
    """Parse one ConfigMap entry into an Environment.

    Raises:
        MalformedEntryError: If a line is malformed or ``order`` is not an integer.
        MissingFieldError: If a required field is absent.
    """
    fields = parse_environment_document(key, document)
    for required in REQUIRED_FIELDS:
        if required not in fields:
            raise MissingFieldError(key, required)

    try:
        order = int(fields["order"])
    except ValueError as e:
        raise MalformedEntryError(
            key, f"order: {fields['order']}", "order must be an integer"
        ) from e

    return Environment(name=fields["name"], namespace=fields["namespace"], order=order)


def build_catalog(record: ConfigMapRecord) -> EnvironmentCatalog:
    """Build the environment catalog from the environments ConfigMap.

    The catalog is keyed by each environment's parsed ``name``, not by the
    ConfigMap data key. When two entries share a name the later one wins.

    Raises:
        MissingProviderLabelError: If the ConfigMap is not labelled provider=fabric8.
        MalformedEntryError: If an entry has a malformed line.
        MissingFieldError: If an entry lacks a required field.
    """
    if not Fabric8Labels.is_fabric8_provided(record.labels):
        raise MissingProviderLabelError(record.labels)

    environments: dict[str, Environment] = {}
    for key, document in record.data.items():
        env = environment_from_document(key, document)
        if env.name in environments:
            logger.warning(
                f"Environment '{env.name}' defined more than once; using entry '{key}'"
            )
        environments[env.name] = env

    logger.debug(f"Built environment catalog: {sorted(environments)}")
    return MappingProxyType(environments)


def ordered_environments(catalog: EnvironmentCatalog) -> list[Environment]:
    """Return the catalog's environments sorted by order, then name."""
    return sorted(catalog.values(), key=lambda env: (env.order, env.name))
