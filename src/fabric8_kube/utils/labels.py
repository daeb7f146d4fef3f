"""Well-known fabric8 labels and names."""


class Fabric8Labels:
    """Label keys and values used by fabric8 on tenant resources."""

    PROVIDER = "provider"
    PROVIDER_FABRIC8 = "fabric8"
    SPACE = "space"

    @staticmethod
    def is_fabric8_provided(labels: dict[str, str] | None) -> bool:
        """Check whether a resource is labelled provider=fabric8."""
        return (labels or {}).get(Fabric8Labels.PROVIDER) == Fabric8Labels.PROVIDER_FABRIC8

    @staticmethod
    def space_selector(space_id: str) -> str:
        """Build the label selector matching resources of a space."""
        return f"{Fabric8Labels.SPACE}={space_id}"


class Fabric8Names:
    """Names of the tenant resources read by this package."""

    ENVIRONMENTS_CONFIG_MAP = "fabric8-environments"
    COMPUTE_QUOTA = "compute-resources"

    # Keys of the compute quota's hard/used maps
    LIMITS_CPU = "limits.cpu"
    LIMITS_MEMORY = "limits.memory"
