"""Calibrated sizing constants for hosted control planes.

Values come from performance and scale regression fitting against the hosted
control plane sizing guidance and are subject to change as more data is
collected. They are the defaults of ``SizingConstants`` and can be overridden
from the settings file.
"""

from typing import Final

# ============================================================================
# Request-based sizing (per HCP)
# ============================================================================

CPU_REQUEST_PER_HCP: Final = 5.0  # vCPU
MEMORY_REQUEST_PER_HCP_GIB: Final = 18.0
PODS_PER_HCP: Final = 75.0

# ============================================================================
# Load-based sizing (per HCP)
# ============================================================================

IDLE_CPU_USAGE_PER_HCP: Final = 2.9  # vCPU at zero API load
IDLE_MEMORY_USAGE_PER_HCP_GIB: Final = 11.1
INCREMENTAL_CPU_USAGE_PER_1K_QPS: Final = 9.0
INCREMENTAL_MEMORY_USAGE_PER_1K_QPS_GIB: Final = 2.5

# ============================================================================
# Platform control plane reserve
# ============================================================================

# Not modeled by default; applied by SizingConstants.with_platform_reserve().
CONTROL_PLANE_CPU_RESERVE_NONE: Final = 0.0
CONTROL_PLANE_MEMORY_RESERVE_GIB_NONE: Final = 0.0
CONTROL_PLANE_CPU_RESERVE: Final = 8.0
CONTROL_PLANE_MEMORY_RESERVE_GIB: Final = 2.5

# ============================================================================
# etcd storage (linear regression over planned pod count)
# ============================================================================

ETCD_STORAGE_SLOPE_GIB_PER_POD: Final = 6.66e-4
ETCD_STORAGE_OFFSET_GIB: Final = 0.103

__all__ = [
    "CONTROL_PLANE_CPU_RESERVE",
    "CONTROL_PLANE_CPU_RESERVE_NONE",
    "CONTROL_PLANE_MEMORY_RESERVE_GIB",
    "CONTROL_PLANE_MEMORY_RESERVE_GIB_NONE",
    "CPU_REQUEST_PER_HCP",
    "ETCD_STORAGE_OFFSET_GIB",
    "ETCD_STORAGE_SLOPE_GIB_PER_POD",
    "IDLE_CPU_USAGE_PER_HCP",
    "IDLE_MEMORY_USAGE_PER_HCP_GIB",
    "INCREMENTAL_CPU_USAGE_PER_1K_QPS",
    "INCREMENTAL_MEMORY_USAGE_PER_1K_QPS_GIB",
    "MEMORY_REQUEST_PER_HCP_GIB",
    "PODS_PER_HCP",
]
