"""Sizing models: node capacity and workload inputs, constants, and results."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field

from hcpsizer.constants.enums import BindingResource
from hcpsizer.constants.sizing import (
    CONTROL_PLANE_CPU_RESERVE,
    CONTROL_PLANE_CPU_RESERVE_NONE,
    CONTROL_PLANE_MEMORY_RESERVE_GIB,
    CONTROL_PLANE_MEMORY_RESERVE_GIB_NONE,
    CPU_REQUEST_PER_HCP,
    ETCD_STORAGE_OFFSET_GIB,
    ETCD_STORAGE_SLOPE_GIB_PER_POD,
    IDLE_CPU_USAGE_PER_HCP,
    IDLE_MEMORY_USAGE_PER_HCP_GIB,
    INCREMENTAL_CPU_USAGE_PER_1K_QPS,
    INCREMENTAL_MEMORY_USAGE_PER_1K_QPS_GIB,
    MEMORY_REQUEST_PER_HCP_GIB,
    PODS_PER_HCP,
)


class NodeCapacity(BaseModel):
    """Allocatable resources of a representative worker node."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    cpu_cores: float  # vCPU
    memory_gib: float
    max_pods: float


class WorkloadSignal(BaseModel):
    """Strategy selection and, for load-based sizing, the observed API rate."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    use_load_based: bool = False
    api_request_rate_qps: float = 0.0


class SizingConstants(BaseModel):
    """Calibrated per-HCP consumption figures used by the sizing model."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    control_plane_cpu_reserve: float = CONTROL_PLANE_CPU_RESERVE_NONE
    control_plane_memory_reserve_gib: float = CONTROL_PLANE_MEMORY_RESERVE_GIB_NONE
    cpu_per_hcp: float = Field(default=CPU_REQUEST_PER_HCP, gt=0)
    memory_per_hcp_gib: float = Field(default=MEMORY_REQUEST_PER_HCP_GIB, gt=0)
    pods_per_hcp: float = Field(default=PODS_PER_HCP, gt=0)
    idle_cpu_per_hcp: float = IDLE_CPU_USAGE_PER_HCP
    idle_memory_per_hcp_gib: float = IDLE_MEMORY_USAGE_PER_HCP_GIB
    incremental_cpu_per_1k_qps: float = INCREMENTAL_CPU_USAGE_PER_1K_QPS
    incremental_memory_per_1k_qps_gib: float = INCREMENTAL_MEMORY_USAGE_PER_1K_QPS_GIB
    etcd_storage_slope: float = ETCD_STORAGE_SLOPE_GIB_PER_POD
    etcd_storage_offset: float = ETCD_STORAGE_OFFSET_GIB

    @classmethod
    def with_platform_reserve(cls, **overrides: float) -> SizingConstants:
        """Constants that subtract the platform control plane reserve from each node."""
        values: dict[str, float] = {
            "control_plane_cpu_reserve": CONTROL_PLANE_CPU_RESERVE,
            "control_plane_memory_reserve_gib": CONTROL_PLANE_MEMORY_RESERVE_GIB,
        }
        values.update(overrides)
        return cls(**values)


class ConstraintTerms(BaseModel):
    """Per-dimension HCP capacity candidates; the smallest one wins."""

    model_config = ConfigDict(frozen=True)

    by_cpu: float
    by_cpu_usage: float
    by_memory: float
    by_memory_usage: float
    by_pods: float

    @property
    def minimum(self) -> float:
        return min(
            self.by_cpu,
            self.by_cpu_usage,
            self.by_memory,
            self.by_memory_usage,
            self.by_pods,
        )


class SizingResult(BaseModel):
    """Outcome of a single sizing calculation."""

    model_config = ConfigDict(frozen=True)

    max_hcps_per_node: float
    binding_resource: BindingResource
    etcd_storage_gib: float
    terms: ConstraintTerms
    node_count: float | None = None
    total_hcps_in_cluster: float | None = None

    @property
    def hcps_per_node(self) -> int:
        """Whole HCPs a node can host (may be negative for undersized nodes)."""
        return math.floor(self.max_hcps_per_node)

    @property
    def can_host_hcps(self) -> bool:
        return self.hcps_per_node >= 1


class SizingRequest(BaseModel):
    """Everything one sizing run needs, collected from the operator or the cluster."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    node: NodeCapacity
    workload: WorkloadSignal
    planned_pod_count: float
    node_count: float
