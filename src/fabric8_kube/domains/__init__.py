"""Domain modules for fabric8-kube."""
