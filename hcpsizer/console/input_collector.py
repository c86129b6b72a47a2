"""Interactive collection of sizing inputs."""

from __future__ import annotations

import logging
import math
from typing import TextIO

from rich.console import Console
from rich.prompt import FloatPrompt, InvalidResponse, Prompt

from hcpsizer.console.config import (
    INVALID_NUMBER_MESSAGE,
    METHOD_CHOICES,
    METHOD_DEFAULT,
    PROMPT_API_RATE,
    PROMPT_CALCULATION_METHOD,
    PROMPT_MAX_PODS,
    PROMPT_NODE_COUNT,
    PROMPT_POD_COUNT,
    PROMPT_WORKER_CPUS,
    PROMPT_WORKER_MEMORY,
)
from hcpsizer.constants.enums import CalculationMethod
from hcpsizer.constants.values import QPS_HINT, QPS_QUERY, STYLE_HINT
from hcpsizer.models.core.node_info import DiscoveryResult
from hcpsizer.models.sizing.sizing_models import (
    NodeCapacity,
    SizingRequest,
    WorkloadSignal,
)

logger = logging.getLogger(__name__)


class NumberPrompt(FloatPrompt):
    """Float prompt that re-asks on anything but a finite number."""

    validate_error_message = INVALID_NUMBER_MESSAGE

    def process_response(self, value: str) -> float:
        number = super().process_response(value)
        if not math.isfinite(number):
            raise InvalidResponse(self.validate_error_message)
        return number


class SizingInputCollector:
    """Prompts the operator for the values the sizing model needs.

    No range checks are applied: zero and negative answers are passed
    through to the model unchanged.
    """

    def __init__(self, console: Console, stream: TextIO | None = None) -> None:
        self._console = console
        self._stream = stream

    def ask_number(self, label: str, default: float | None = None) -> float:
        """Ask for a number, re-prompting until the answer parses."""
        if default is None:
            value = NumberPrompt.ask(label, console=self._console, stream=self._stream)
        else:
            value = NumberPrompt.ask(
                label, console=self._console, default=default, stream=self._stream
            )
        return float(value)

    def ask_method(self) -> CalculationMethod:
        """Ask whether to size from requests or from observed load."""
        answer = Prompt.ask(
            PROMPT_CALCULATION_METHOD,
            console=self._console,
            choices=METHOD_CHOICES,
            default=METHOD_DEFAULT,
            stream=self._stream,
        )
        return CalculationMethod(answer)

    def show_qps_hint(self) -> None:
        """Print the PromQL query that measures per-HCP API request rate."""
        self._console.print(QPS_HINT, style=STYLE_HINT, markup=False)
        self._console.print(QPS_QUERY, style=STYLE_HINT, markup=False, highlight=False)

    def collect_node_capacity(self) -> NodeCapacity:
        return NodeCapacity(
            cpu_cores=self.ask_number(PROMPT_WORKER_CPUS),
            memory_gib=self.ask_number(PROMPT_WORKER_MEMORY),
            max_pods=self.ask_number(PROMPT_MAX_PODS),
        )

    def collect_workload(self) -> WorkloadSignal:
        method = self.ask_method()
        if method is not CalculationMethod.LOAD_BASED:
            return WorkloadSignal(use_load_based=False)

        self.show_qps_hint()
        return WorkloadSignal(
            use_load_based=True,
            api_request_rate_qps=self.ask_number(PROMPT_API_RATE),
        )

    def collect(self, discovered: DiscoveryResult | None = None) -> SizingRequest:
        """Collect a complete sizing request.

        Args:
            discovered: Node capacity discovered from a cluster. When given,
                the node capacity prompts are skipped and the node count
                defaults to the number of discovered nodes.

        Returns:
            SizingRequest ready for the calculator.
        """
        if discovered is None:
            node = self.collect_node_capacity()
            node_count_default = None
        else:
            node = discovered.node_capacity
            node_count_default = float(discovered.node_count)

        planned_pod_count = self.ask_number(PROMPT_POD_COUNT)
        node_count = self.ask_number(PROMPT_NODE_COUNT, default=node_count_default)
        workload = self.collect_workload()

        request = SizingRequest(
            node=node,
            workload=workload,
            planned_pod_count=planned_pod_count,
            node_count=node_count,
        )
        logger.debug("Collected sizing request: %s", request.model_dump())
        return request
