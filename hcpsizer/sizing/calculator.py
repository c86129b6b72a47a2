"""Hosted control plane sizing model.

Translates a worker node's allocatable capacity and a workload signal into the
maximum number of HCPs per node, the resource that binds that number, and the
etcd storage the planned pod count needs.
"""

from __future__ import annotations

import logging
import math

from hcpsizer.constants.enums import BindingResource
from hcpsizer.models.sizing.sizing_models import (
    ConstraintTerms,
    NodeCapacity,
    SizingConstants,
    SizingResult,
    WorkloadSignal,
)

logger = logging.getLogger(__name__)

DEFAULT_SIZING_CONSTANTS = SizingConstants()


def _divide(numerator: float, denominator: float) -> float:
    """Divide, treating a zero denominator as unbounded capacity."""
    if denominator == 0:
        return math.inf
    return numerator / denominator


def compute_constraint_terms(
    node: NodeCapacity,
    workload: WorkloadSignal,
    constants: SizingConstants = DEFAULT_SIZING_CONSTANTS,
) -> ConstraintTerms:
    """Compute the HCP capacity allowed by each resource dimension.

    Request-based sizing reuses the request terms for the usage terms, so both
    strategies share the same minimum over five candidates.
    """
    by_cpu = _divide(node.cpu_cores - constants.control_plane_cpu_reserve, constants.cpu_per_hcp)
    by_memory = _divide(
        node.memory_gib - constants.control_plane_memory_reserve_gib,
        constants.memory_per_hcp_gib,
    )
    by_pods = _divide(node.max_pods, constants.pods_per_hcp)

    if workload.use_load_based:
        kqps = workload.api_request_rate_qps / 1000
        by_cpu_usage = _divide(
            node.cpu_cores,
            constants.idle_cpu_per_hcp + kqps * constants.incremental_cpu_per_1k_qps,
        )
        by_memory_usage = _divide(
            node.memory_gib,
            constants.idle_memory_per_hcp_gib + kqps * constants.incremental_memory_per_1k_qps_gib,
        )
    else:
        by_cpu_usage = by_cpu
        by_memory_usage = by_memory

    return ConstraintTerms(
        by_cpu=by_cpu,
        by_cpu_usage=by_cpu_usage,
        by_memory=by_memory,
        by_memory_usage=by_memory_usage,
        by_pods=by_pods,
    )


def binding_resource_for(terms: ConstraintTerms) -> BindingResource:
    """Name the dimension that achieves the minimum.

    Dimensions are checked CPU, Memory, Pods and a later exact match overwrites
    an earlier one, so ties resolve to the last dimension checked.
    """
    minimum = terms.minimum
    binding = BindingResource.CPU
    if minimum in (terms.by_memory, terms.by_memory_usage):
        binding = BindingResource.MEMORY
    if minimum == terms.by_pods:
        binding = BindingResource.PODS
    return binding


def estimate_max_hcps(
    node: NodeCapacity,
    workload: WorkloadSignal,
    constants: SizingConstants = DEFAULT_SIZING_CONSTANTS,
) -> tuple[float, BindingResource]:
    """Estimate how many HCPs a single node can host.

    Args:
        node: Allocatable capacity of a representative worker node.
        workload: Request-based or load-based strategy and API rate.
        constants: Per-HCP consumption figures.

    Returns:
        Tuple of (unfloored max HCPs per node, binding resource). The count
        can be negative when the platform reserve exceeds node capacity.
    """
    logger.debug(
        "Sizing node: cpu=%s memory_gib=%s max_pods=%s qps=%s load_based=%s",
        node.cpu_cores,
        node.memory_gib,
        node.max_pods,
        workload.api_request_rate_qps,
        workload.use_load_based,
    )
    terms = compute_constraint_terms(node, workload, constants)
    return terms.minimum, binding_resource_for(terms)


def estimate_etcd_storage(
    planned_pod_count: float,
    constants: SizingConstants = DEFAULT_SIZING_CONSTANTS,
) -> float:
    """Estimate etcd storage in GiB for the planned number of pods."""
    return constants.etcd_storage_slope * planned_pod_count + constants.etcd_storage_offset


def scale_to_cluster(max_hcps_per_node: float, node_count: float) -> float:
    """Scale the per-node capacity to a cluster of identical nodes.

    The per-node value is floored first: a node only hosts whole HCPs.
    """
    return node_count * math.floor(max_hcps_per_node)


class HCPSizingCalculator:
    """Computes a full SizingResult from node capacity and workload inputs."""

    def __init__(self, constants: SizingConstants | None = None) -> None:
        self.constants = constants or DEFAULT_SIZING_CONSTANTS

    def compute(
        self,
        node: NodeCapacity,
        workload: WorkloadSignal,
        *,
        planned_pod_count: float,
        node_count: float | None = None,
    ) -> SizingResult:
        """Run the sizing model once.

        Args:
            node: Allocatable capacity of a representative worker node.
            workload: Sizing strategy and API rate.
            planned_pod_count: Pods planned across the hosted clusters, for etcd sizing.
            node_count: Optional number of identical worker nodes.

        Returns:
            SizingResult with per-node and cluster estimates.
        """
        terms = compute_constraint_terms(node, workload, self.constants)
        max_hcps = terms.minimum
        binding = binding_resource_for(terms)
        logger.debug(
            "Constraint terms: %s -> %.4f (%s)",
            terms.model_dump(),
            max_hcps,
            binding.value,
        )

        total = None
        if node_count is not None:
            total = scale_to_cluster(max_hcps, node_count)

        return SizingResult(
            max_hcps_per_node=max_hcps,
            binding_resource=binding,
            etcd_storage_gib=estimate_etcd_storage(planned_pod_count, self.constants),
            terms=terms,
            node_count=node_count,
            total_hcps_in_cluster=total,
        )
