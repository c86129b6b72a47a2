"""Unit tests for the HCP sizing calculator."""

from __future__ import annotations

import math

import pytest

from hcpsizer.constants.enums import BindingResource
from hcpsizer.models.sizing.sizing_models import (
    ConstraintTerms,
    NodeCapacity,
    SizingConstants,
    WorkloadSignal,
)
from hcpsizer.sizing.calculator import (
    HCPSizingCalculator,
    binding_resource_for,
    compute_constraint_terms,
    estimate_etcd_storage,
    estimate_max_hcps,
    scale_to_cluster,
)

REQUEST_BASED = WorkloadSignal(use_load_based=False)


def _node(cpu: float = 64.0, memory: float = 256.0, pods: float = 500.0) -> NodeCapacity:
    return NodeCapacity(cpu_cores=cpu, memory_gib=memory, max_pods=pods)


def _terms(
    cpu: float, cpu_usage: float, memory: float, memory_usage: float, pods: float
) -> ConstraintTerms:
    return ConstraintTerms(
        by_cpu=cpu,
        by_cpu_usage=cpu_usage,
        by_memory=memory,
        by_memory_usage=memory_usage,
        by_pods=pods,
    )


@pytest.mark.unit
@pytest.mark.fast
class TestEstimateMaxHCPs:
    """Tests for estimate_max_hcps."""

    def test_request_based_with_platform_reserve_is_pod_bound(self) -> None:
        constants = SizingConstants.with_platform_reserve()
        terms = compute_constraint_terms(_node(), REQUEST_BASED, constants)

        assert terms.by_cpu == pytest.approx(11.2)
        assert terms.by_memory == pytest.approx(253.5 / 18)
        assert terms.by_pods == pytest.approx(500 / 75)

        max_hcps, binding = estimate_max_hcps(_node(), REQUEST_BASED, constants)

        assert max_hcps == pytest.approx(6.6667, abs=1e-4)
        assert binding is BindingResource.PODS
        assert math.floor(max_hcps) == 6

    def test_request_based_without_reserve(self) -> None:
        terms = compute_constraint_terms(_node(), REQUEST_BASED)

        assert terms.by_cpu == pytest.approx(12.8)
        assert terms.by_memory == pytest.approx(256 / 18)

    def test_request_based_usage_terms_mirror_request_terms(self) -> None:
        terms = compute_constraint_terms(_node(), REQUEST_BASED)

        assert terms.by_cpu_usage == terms.by_cpu
        assert terms.by_memory_usage == terms.by_memory

    def test_load_based_is_cpu_usage_bound(self) -> None:
        workload = WorkloadSignal(use_load_based=True, api_request_rate_qps=2000)
        constants = SizingConstants.with_platform_reserve()

        terms = compute_constraint_terms(_node(), workload, constants)
        max_hcps, binding = estimate_max_hcps(_node(), workload, constants)

        assert terms.by_cpu_usage == pytest.approx(64 / 20.9)
        assert terms.by_memory_usage == pytest.approx(256 / 16.1)
        assert max_hcps == pytest.approx(3.0622, abs=1e-4)
        assert binding is BindingResource.CPU

    def test_load_based_at_zero_qps_is_computable(self) -> None:
        workload = WorkloadSignal(use_load_based=True, api_request_rate_qps=0)

        load_max, load_binding = estimate_max_hcps(_node(), workload)
        request_max, _ = estimate_max_hcps(_node(), REQUEST_BASED)

        assert math.isfinite(load_max)
        assert math.isfinite(request_max)
        assert load_binding in BindingResource

    def test_binding_term_equals_result(self) -> None:
        workloads = [
            REQUEST_BASED,
            WorkloadSignal(use_load_based=True, api_request_rate_qps=500),
            WorkloadSignal(use_load_based=True, api_request_rate_qps=5000),
        ]
        nodes = [_node(), _node(cpu=8, memory=512), _node(memory=32), _node(pods=2000)]
        for node in nodes:
            for workload in workloads:
                terms = compute_constraint_terms(node, workload)
                max_hcps, binding = estimate_max_hcps(node, workload)
                candidates = {
                    BindingResource.CPU: (terms.by_cpu, terms.by_cpu_usage),
                    BindingResource.MEMORY: (terms.by_memory, terms.by_memory_usage),
                    BindingResource.PODS: (terms.by_pods,),
                }
                assert max_hcps in candidates[binding]

    @pytest.mark.parametrize("dimension", ["cpu", "memory", "pods"])
    def test_monotonic_in_each_dimension(self, dimension: str) -> None:
        workload = WorkloadSignal(use_load_based=True, api_request_rate_qps=1500)
        previous = -math.inf
        for value in (0, 4, 16, 64, 128, 512, 2048):
            node = _node(**{dimension: float(value)})
            max_hcps, _ = estimate_max_hcps(node, workload)
            assert max_hcps >= previous
            previous = max_hcps

    def test_undersized_node_goes_negative(self) -> None:
        constants = SizingConstants.with_platform_reserve()

        max_hcps, binding = estimate_max_hcps(_node(cpu=4), REQUEST_BASED, constants)

        assert max_hcps == pytest.approx(-0.8)
        assert binding is BindingResource.CPU

    def test_zero_denominator_yields_unbounded_term(self) -> None:
        constants = SizingConstants(idle_cpu_per_hcp=0.0, idle_memory_per_hcp_gib=0.0)
        workload = WorkloadSignal(use_load_based=True, api_request_rate_qps=0)

        terms = compute_constraint_terms(_node(), workload, constants)
        max_hcps, binding = estimate_max_hcps(_node(), workload, constants)

        assert terms.by_cpu_usage == math.inf
        assert terms.by_memory_usage == math.inf
        assert max_hcps == pytest.approx(500 / 75)
        assert binding is BindingResource.PODS

    def test_zero_and_negative_inputs_do_not_raise(self) -> None:
        workload = WorkloadSignal(use_load_based=True, api_request_rate_qps=-100)

        max_hcps, _ = estimate_max_hcps(_node(cpu=0, memory=-10, pods=0), workload)

        assert max_hcps <= 0


@pytest.mark.unit
@pytest.mark.fast
class TestBindingResourceTieBreak:
    """Ties resolve to the dimension checked last (CPU, Memory, Pods)."""

    def test_cpu_only(self) -> None:
        assert binding_resource_for(_terms(1, 1, 2, 2, 4)) is BindingResource.CPU

    def test_cpu_usage_only(self) -> None:
        assert binding_resource_for(_terms(3, 1, 2, 2, 4)) is BindingResource.CPU

    def test_memory_usage_only(self) -> None:
        assert binding_resource_for(_terms(3, 3, 2, 1, 4)) is BindingResource.MEMORY

    def test_cpu_memory_tie_reports_memory(self) -> None:
        assert binding_resource_for(_terms(2, 2, 2, 2, 4)) is BindingResource.MEMORY

    def test_three_way_tie_reports_pods(self) -> None:
        assert binding_resource_for(_terms(2, 2, 2, 2, 2)) is BindingResource.PODS

    def test_cpu_pods_tie_reports_pods(self) -> None:
        assert binding_resource_for(_terms(2, 2, 3, 3, 2)) is BindingResource.PODS

    def test_tie_from_node_values(self) -> None:
        # 10 / 5 == 36 / 18 == 2.0 exactly
        _, binding = estimate_max_hcps(_node(cpu=10, memory=36, pods=300), REQUEST_BASED)
        assert binding is BindingResource.MEMORY

        _, binding = estimate_max_hcps(_node(cpu=10, memory=36, pods=150), REQUEST_BASED)
        assert binding is BindingResource.PODS


@pytest.mark.unit
@pytest.mark.fast
class TestEstimateEtcdStorage:
    """Tests for estimate_etcd_storage."""

    def test_offset_at_zero_pods(self) -> None:
        assert estimate_etcd_storage(0) == 0.103

    def test_thousand_pods(self) -> None:
        assert estimate_etcd_storage(1000) == pytest.approx(0.769)

    def test_strictly_increasing(self) -> None:
        values = [estimate_etcd_storage(count) for count in (0, 1, 100, 10_000)]
        assert values == sorted(values)
        assert len(set(values)) == len(values)

    def test_uses_configured_constants(self) -> None:
        constants = SizingConstants(etcd_storage_slope=1.0, etcd_storage_offset=2.0)
        assert estimate_etcd_storage(3, constants) == 5.0


@pytest.mark.unit
@pytest.mark.fast
class TestScaleToCluster:
    """Tests for scale_to_cluster."""

    def test_floors_before_scaling(self) -> None:
        assert scale_to_cluster(7.8, 3) == 21

    def test_negative_capacity_scales_negative(self) -> None:
        assert scale_to_cluster(-0.8, 3) == -3

    def test_zero_nodes(self) -> None:
        assert scale_to_cluster(6.67, 0) == 0


@pytest.mark.unit
@pytest.mark.fast
class TestHCPSizingCalculator:
    """Tests for HCPSizingCalculator.compute."""

    def test_compute_full_result(self) -> None:
        calculator = HCPSizingCalculator(SizingConstants.with_platform_reserve())

        result = calculator.compute(
            _node(), REQUEST_BASED, planned_pod_count=1000, node_count=3
        )

        assert result.max_hcps_per_node == pytest.approx(500 / 75)
        assert result.binding_resource is BindingResource.PODS
        assert result.hcps_per_node == 6
        assert result.total_hcps_in_cluster == 18
        assert result.node_count == 3
        assert result.etcd_storage_gib == pytest.approx(0.769)
        assert result.can_host_hcps is True

    def test_compute_without_node_count(self) -> None:
        result = HCPSizingCalculator().compute(_node(), REQUEST_BASED, planned_pod_count=0)

        assert result.total_hcps_in_cluster is None
        assert result.node_count is None

    def test_default_constants(self) -> None:
        calculator = HCPSizingCalculator()
        assert calculator.constants == SizingConstants()

    def test_undersized_node_cannot_host(self) -> None:
        calculator = HCPSizingCalculator(SizingConstants.with_platform_reserve())

        result = calculator.compute(
            _node(cpu=4), REQUEST_BASED, planned_pod_count=10, node_count=2
        )

        assert result.hcps_per_node == -1
        assert result.can_host_hcps is False
        assert result.total_hcps_in_cluster == -2
