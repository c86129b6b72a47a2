"""Unit tests for sizing models."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from hcpsizer.constants.enums import BindingResource
from hcpsizer.models.sizing.sizing_models import (
    ConstraintTerms,
    NodeCapacity,
    SizingConstants,
    SizingRequest,
    SizingResult,
    WorkloadSignal,
)


@pytest.mark.unit
class TestNodeCapacity:
    """Tests for NodeCapacity."""

    def test_accepts_negative_and_zero(self) -> None:
        node = NodeCapacity(cpu_cores=-1, memory_gib=0, max_pods=0)
        assert node.cpu_cores == -1.0

    def test_rejects_non_finite(self) -> None:
        with pytest.raises(ValidationError):
            NodeCapacity(cpu_cores=math.nan, memory_gib=1, max_pods=1)
        with pytest.raises(ValidationError):
            NodeCapacity(cpu_cores=1, memory_gib=math.inf, max_pods=1)

    def test_is_frozen(self) -> None:
        node = NodeCapacity(cpu_cores=1, memory_gib=1, max_pods=1)
        with pytest.raises(ValidationError):
            node.cpu_cores = 2  # type: ignore[misc]


@pytest.mark.unit
class TestWorkloadSignal:
    """Tests for WorkloadSignal."""

    def test_defaults_to_request_based(self) -> None:
        workload = WorkloadSignal()
        assert workload.use_load_based is False
        assert workload.api_request_rate_qps == 0.0

    def test_rejects_nan_rate(self) -> None:
        with pytest.raises(ValidationError):
            WorkloadSignal(use_load_based=True, api_request_rate_qps=math.nan)


@pytest.mark.unit
class TestSizingConstants:
    """Tests for SizingConstants."""

    def test_defaults(self) -> None:
        constants = SizingConstants()
        assert constants.control_plane_cpu_reserve == 0.0
        assert constants.control_plane_memory_reserve_gib == 0.0
        assert constants.cpu_per_hcp == 5
        assert constants.memory_per_hcp_gib == 18
        assert constants.pods_per_hcp == 75
        assert constants.idle_cpu_per_hcp == 2.9
        assert constants.idle_memory_per_hcp_gib == 11.1
        assert constants.incremental_cpu_per_1k_qps == 9.0
        assert constants.incremental_memory_per_1k_qps_gib == 2.5
        assert constants.etcd_storage_slope == 6.66e-4
        assert constants.etcd_storage_offset == 0.103

    def test_with_platform_reserve(self) -> None:
        constants = SizingConstants.with_platform_reserve()
        assert constants.control_plane_cpu_reserve == 8.0
        assert constants.control_plane_memory_reserve_gib == 2.5

    def test_with_platform_reserve_overrides(self) -> None:
        constants = SizingConstants.with_platform_reserve(cpu_per_hcp=4.0)
        assert constants.cpu_per_hcp == 4.0
        assert constants.control_plane_cpu_reserve == 8.0

    @pytest.mark.parametrize("field", ["cpu_per_hcp", "memory_per_hcp_gib", "pods_per_hcp"])
    def test_per_hcp_requests_must_be_positive(self, field: str) -> None:
        with pytest.raises(ValidationError):
            SizingConstants(**{field: 0})

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_rejects_non_finite_constants(self, value: float) -> None:
        with pytest.raises(ValidationError):
            SizingConstants(control_plane_cpu_reserve=value)


@pytest.mark.unit
class TestConstraintTermsAndResult:
    """Tests for ConstraintTerms and SizingResult."""

    def test_minimum_ignores_unbounded_terms(self) -> None:
        terms = ConstraintTerms(
            by_cpu=3, by_cpu_usage=math.inf, by_memory=4, by_memory_usage=math.inf, by_pods=5
        )
        assert terms.minimum == 3

    def test_hcps_per_node_floors(self) -> None:
        terms = ConstraintTerms(
            by_cpu=6.9, by_cpu_usage=6.9, by_memory=7, by_memory_usage=7, by_pods=8
        )
        result = SizingResult(
            max_hcps_per_node=6.9,
            binding_resource=BindingResource.CPU,
            etcd_storage_gib=0.1,
            terms=terms,
        )
        assert result.hcps_per_node == 6
        assert result.can_host_hcps is True

    def test_fractional_node_cannot_host(self) -> None:
        terms = ConstraintTerms(
            by_cpu=0.5, by_cpu_usage=0.5, by_memory=7, by_memory_usage=7, by_pods=8
        )
        result = SizingResult(
            max_hcps_per_node=0.5,
            binding_resource=BindingResource.CPU,
            etcd_storage_gib=0.1,
            terms=terms,
        )
        assert result.hcps_per_node == 0
        assert result.can_host_hcps is False

    def test_sizing_request_bundles_inputs(self) -> None:
        request = SizingRequest(
            node=NodeCapacity(cpu_cores=8, memory_gib=32, max_pods=250),
            workload=WorkloadSignal(),
            planned_pod_count=100,
            node_count=3,
        )
        assert request.node.max_pods == 250
        assert request.node_count == 3
