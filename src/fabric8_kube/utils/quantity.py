"""Conversion between Kubernetes resource quantities and floats.

Quota values arrive from the cluster API as quantity strings such as
``"500m"``, ``"0.7"`` or ``"1Gi"``. The kubernetes client parses these into
``Decimal`` values; everything above this module works with plain floats.
"""

from __future__ import annotations

import math
from decimal import Decimal

from kubernetes.utils import parse_quantity as _parse_k8s_quantity  # type: ignore[import-untyped]

from fabric8_kube.utils.errors import QuantityFormatError

# Relative tolerance for comparing quantities that went through text
FLOAT_EPSILON = 1e-8


def parse_quantity(raw: str | int | float) -> float:
    """Parse a Kubernetes quantity into a float.

    Args:
        raw: Quantity string (e.g. "250m", "1.5", "512Mi") or a number.

    Raises:
        QuantityFormatError: If the value is not a valid, finite quantity.
    """
    if isinstance(raw, bool) or raw is None:
        raise QuantityFormatError(raw, "not a quantity")
    if isinstance(raw, str) and not raw.strip():
        raise QuantityFormatError(raw, "empty")
    try:
        value: Decimal = _parse_k8s_quantity(raw.strip() if isinstance(raw, str) else raw)
    except (ValueError, ArithmeticError) as e:
        raise QuantityFormatError(raw, str(e)) from e
    if not value.is_finite():
        raise QuantityFormatError(raw, "not finite")
    return float(value)


def format_quantity(value: float) -> str:
    """Format a float as a plain decimal quantity string.

    The shortest representation that parses back to the same float is used,
    so ``0.7`` becomes ``"0.7"`` and ``1024.0`` becomes ``"1024"``.
    """
    if isinstance(value, bool) or not math.isfinite(value):
        raise QuantityFormatError(value, "not a finite number")
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def quantities_equal(a: float, b: float, epsilon: float = FLOAT_EPSILON) -> bool:
    """Compare two quantities with a relative tolerance."""
    return math.isclose(a, b, rel_tol=epsilon, abs_tol=0.0) or a == b
