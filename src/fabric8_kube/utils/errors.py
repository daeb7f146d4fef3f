"""Exception hierarchy for fabric8-kube."""


class Fabric8Error(Exception):
    """Base class for all fabric8-kube errors."""


class CatalogError(Fabric8Error):
    """The environments ConfigMap could not be turned into a catalog."""


class MissingProviderLabelError(CatalogError):
    """The environments ConfigMap is not labelled as provided by fabric8."""

    def __init__(self, labels: dict[str, str] | None = None) -> None:
        self.labels = dict(labels or {})
        super().__init__(
            f"Environments ConfigMap is missing label provider=fabric8 (labels: {self.labels})"
        )


class MalformedEntryError(CatalogError):
    """An environment document contains a line that is not `field: value`."""

    def __init__(self, key: str, line: str, reason: str = "expected 'field: value'") -> None:
        self.key = key
        self.line = line
        super().__init__(f"Malformed line in environment '{key}': {line!r} ({reason})")


class MissingFieldError(CatalogError):
    """An environment document lacks a required field."""

    def __init__(self, key: str, field: str) -> None:
        self.key = key
        self.field = field
        super().__init__(f"Environment '{key}' is missing required field '{field}'")


class QuantityFormatError(Fabric8Error, ValueError):
    """A resource quantity string could not be parsed or produced."""

    def __init__(self, value: object, reason: str | None = None) -> None:
        self.value = value
        message = f"Invalid resource quantity: {value!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class ClusterURLFormatError(Fabric8Error, ValueError):
    """The cluster API URL does not have the expected https://api.<domain> shape."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        super().__init__(f"Invalid cluster URL {url!r}: {reason}")


class NotFoundError(Fabric8Error):
    """A requested resource does not exist."""

    def __init__(self, resource_type: str, name: str, namespace: str | None = None) -> None:
        self.resource_type = resource_type
        self.name = name
        self.namespace = namespace
        if namespace:
            message = f"{resource_type} '{name}' not found in namespace '{namespace}'"
        else:
            message = f"{resource_type} '{name}' not found"
        super().__init__(message)


class EnvironmentNotFoundError(NotFoundError):
    """No environment with the given name exists in the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__("Environment", name)


class QuotaNotFoundError(NotFoundError):
    """The environment's namespace has no compute quota."""

    def __init__(self, name: str, namespace: str) -> None:
        super().__init__("ResourceQuota", name, namespace)
