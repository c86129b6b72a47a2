"""Tests for interactive input collection."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from hcpsizer.console.input_collector import SizingInputCollector
from hcpsizer.constants.enums import CalculationMethod
from hcpsizer.models.core.node_info import DiscoveryResult, NodeResourceInfo
from hcpsizer.models.sizing.sizing_models import NodeCapacity


def _collector(answers: str) -> tuple[SizingInputCollector, io.StringIO]:
    output = io.StringIO()
    console = Console(file=output, width=120)
    return SizingInputCollector(console, stream=io.StringIO(answers)), output


@pytest.fixture
def discovery() -> DiscoveryResult:
    """Two discovered nodes with the first one as representative."""
    nodes = [
        NodeResourceInfo(name="master-0", cpu_cores=64.0, memory_gib=256.0, max_pods=500),
        NodeResourceInfo(name="master-1", cpu_cores=64.0, memory_gib=256.0, max_pods=500),
    ]
    return DiscoveryResult(
        nodes=nodes,
        representative=nodes[0],
        node_capacity=NodeCapacity(cpu_cores=64.0, memory_gib=256.0, max_pods=500),
    )


@pytest.mark.unit
@pytest.mark.fast
class TestSizingInputCollector:
    """Tests for SizingInputCollector."""

    def test_collect_request_based(self) -> None:
        collector, output = _collector("64\n256\n500\n1000\n3\nrequest-based\n")

        request = collector.collect()

        assert request.node == NodeCapacity(cpu_cores=64.0, memory_gib=256.0, max_pods=500.0)
        assert request.planned_pod_count == 1000.0
        assert request.node_count == 3.0
        assert request.workload.use_load_based is False
        text = output.getvalue()
        assert "Enter the number of vCPUs on the worker node" in text
        assert "Select Calculation Method" in text
        assert "Hint:" not in text

    def test_collect_load_based_shows_hint(self) -> None:
        collector, output = _collector("64\n256\n500\n1000\n3\nload-based\n2000\n")

        request = collector.collect()

        assert request.workload.use_load_based is True
        assert request.workload.api_request_rate_qps == 2000.0
        text = output.getvalue()
        assert "apiserver_request_total" in text
        assert "Enter the estimated API rate (QPS)" in text

    def test_invalid_number_is_reprompted(self) -> None:
        collector, output = _collector("abc\n64\n")

        assert collector.ask_number("CPUs") == 64.0
        assert "Please enter a valid number" in output.getvalue()

    def test_non_finite_number_is_rejected(self) -> None:
        collector, output = _collector("inf\nnan\n8\n")

        assert collector.ask_number("CPUs") == 8.0
        assert output.getvalue().count("Please enter a valid number") == 2

    def test_negative_and_zero_pass_through(self) -> None:
        collector, _ = _collector("0\n-4\n")

        assert collector.ask_number("CPUs") == 0.0
        assert collector.ask_number("Memory") == -4.0

    def test_invalid_method_is_reprompted(self) -> None:
        collector, output = _collector("guess\nload-based\n")

        assert collector.ask_method() is CalculationMethod.LOAD_BASED
        assert "Please select one of the available options" in output.getvalue()

    def test_method_defaults_to_request_based(self) -> None:
        collector, _ = _collector("")

        assert collector.ask_method() is CalculationMethod.REQUEST_BASED

    def test_collect_with_discovery_skips_node_prompts(
        self, discovery: DiscoveryResult
    ) -> None:
        collector, output = _collector("1000\n5\nrequest-based\n")

        request = collector.collect(discovery)

        assert request.node == discovery.node_capacity
        assert request.node_count == 5.0
        assert "Enter the number of vCPUs" not in output.getvalue()

    def test_discovery_node_count_defaults_to_discovered(
        self, discovery: DiscoveryResult
    ) -> None:
        collector, _ = _collector("1000\n")

        request = collector.collect(discovery)

        assert request.node_count == 2.0
        assert request.workload.use_load_based is False
