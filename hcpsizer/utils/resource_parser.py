"""Resource parsing utilities for Kubernetes quantities.

Provides functions to parse node allocatable values into sizing units:
- CPU: parsed to cores (float)
- Memory: parsed to bytes, then GiB
- Pods: parsed to a whole pod count, or None when it cannot be determined
"""

from __future__ import annotations

from typing import Any

# Module-level constants to avoid re-creating on every function call.
# Binary suffixes are checked before decimal ones so "Mi" never matches "M".
_BINARY_MULTIPLIERS: tuple[tuple[str, int], ...] = (
    ("Ki", 1024),
    ("Mi", 1024**2),
    ("Gi", 1024**3),
    ("Ti", 1024**4),
    ("Pi", 1024**5),
    ("Ei", 1024**6),
)
_DECIMAL_MULTIPLIERS: tuple[tuple[str, int], ...] = (
    ("k", 10**3),
    ("M", 10**6),
    ("G", 10**9),
    ("T", 10**12),
    ("P", 10**15),
    ("E", 10**18),
)

BYTES_PER_GIB = 1024**3


def parse_cpu(cpu_str: str) -> float:
    """Parse CPU string to cores (float).

    Handles various CPU resource formats:
    - Nanocores: "500000000n" -> 0.5 cores
    - Microcores: "500000u" -> 0.5 cores
    - Millicores: "63500m" -> 63.5 cores
    - Decimal: "1.5" -> 1.5 cores
    - Integer: "64" -> 64.0 cores

    Args:
        cpu_str: CPU value as string (e.g., "100m", "1.5", "64")

    Returns:
        CPU value in cores as float. Returns 0.0 on parse error or empty string.
    """
    if not cpu_str:
        return 0.0

    cpu_str = str(cpu_str).strip()

    for suffix, divisor in (("n", 1_000_000_000), ("u", 1_000_000), ("m", 1000)):
        if cpu_str.endswith(suffix):
            try:
                return float(cpu_str[:-1]) / divisor
            except ValueError:
                return 0.0

    # Handle plain numbers (cores)
    try:
        return float(cpu_str)
    except ValueError:
        return 0.0


def _quantity_to_number(quantity: str) -> float:
    """Convert a suffixed quantity string to a plain number.

    Raises:
        ValueError: If the numeric part cannot be parsed.
    """
    for suffix, mult in _BINARY_MULTIPLIERS:
        if quantity.endswith(suffix):
            return float(quantity[: -len(suffix)]) * mult
    for suffix, mult in _DECIMAL_MULTIPLIERS:
        if quantity.endswith(suffix):
            return float(quantity[: -len(suffix)]) * mult
    return float(quantity)


def memory_str_to_bytes(memory_str: str) -> float:
    """Convert memory string to bytes.

    Handles binary ("1024Ki", "512Mi", "1Gi", "1Ti") and decimal
    ("128974848", "129e6", "129M", "1G") memory formats.

    Args:
        memory_str: Memory value as string (e.g., "512Mi", "1Gi")

    Returns:
        Memory value in bytes as float. Returns 0.0 on parse error or empty string.
    """
    if not memory_str:
        return 0.0

    try:
        return _quantity_to_number(str(memory_str).strip())
    except ValueError:
        return 0.0


def bytes_to_gib(value: float) -> float:
    """Convert bytes to GiB."""
    return value / BYTES_PER_GIB


def parse_pod_count(value: Any) -> int | None:
    """Parse an allocatable pods quantity to a whole pod count.

    Args:
        value: Quantity such as "250", 110 or "1k"

    Returns:
        Pod count, or None when the value is missing, not a whole number,
        or cannot be parsed.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value

    text = str(value).strip()
    if not text:
        return None

    try:
        number = _quantity_to_number(text)
    except ValueError:
        return None

    if not number.is_integer():
        return None
    return int(number)
