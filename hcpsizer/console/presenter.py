"""Sizing presenter - renders discovery and sizing results to the console."""

from __future__ import annotations

import json
import math
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from hcpsizer.console.config import (
    CONSTRAINT_ROW_LABELS,
    CONSTRAINT_TABLE_COLUMNS,
    NODE_TABLE_COLUMNS,
)
from hcpsizer.constants.values import STYLE_NOTE, STYLE_RESULT, STYLE_WARNING
from hcpsizer.models.core.node_info import DiscoveryResult
from hcpsizer.models.sizing.sizing_models import SizingResult


def format_hcps(value: float) -> str:
    """Format an HCP count to two decimals; unbounded terms print as 'unbounded'."""
    if math.isinf(value):
        return "unbounded" if value > 0 else "-unbounded"
    return f"{value:.2f}"


def format_gib(value: float) -> str:
    return f"{value:.3f} GiB"


def format_count(value: float) -> str:
    """Format a count without a trailing '.0' when it is whole."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"


class SizingPresenter:
    """Formats sizing data for the terminal."""

    def __init__(self, console: Console) -> None:
        self._console = console

    def build_node_table(self, discovery: DiscoveryResult) -> Table:
        """Build a table of discovered nodes; the representative is marked with '*'."""
        table = Table(title="Discovered nodes")
        for name, justify in NODE_TABLE_COLUMNS:
            table.add_column(name, justify=justify)  # type: ignore[arg-type]

        for node in discovery.nodes:
            marker = "*" if node.name == discovery.representative.name else ""
            table.add_row(
                escape(f"{node.name}{marker}"),
                f"{node.cpu_cores:.2f}",
                f"{node.memory_gib:.2f}",
                "-" if node.max_pods is None else str(node.max_pods),
                "yes" if node.is_ready else "no",
            )
        return table

    def build_constraint_table(self, result: SizingResult) -> Table:
        """Build the per-dimension breakdown table."""
        table = Table(title="HCPs per node by constraint")
        for name, justify in CONSTRAINT_TABLE_COLUMNS:
            table.add_column(name, justify=justify)  # type: ignore[arg-type]

        terms = result.terms.model_dump()
        for field_name, label in CONSTRAINT_ROW_LABELS.items():
            value = terms[field_name]
            style = "bold" if value == result.max_hcps_per_node else None
            table.add_row(label, format_hcps(value), style=style)
        return table

    def render_discovery(self, discovery: DiscoveryResult) -> None:
        self._console.print(self.build_node_table(discovery))
        if discovery.max_pods_defaulted:
            self._console.print(
                f"Node {escape(discovery.representative.name)} does not report allocatable "
                f"pods; using {format_count(discovery.node_capacity.max_pods)}.",
                style=STYLE_NOTE,
            )

    def render_result(self, result: SizingResult, *, show_breakdown: bool = True) -> None:
        """Print the sizing result."""
        if show_breakdown:
            self._console.print(self.build_constraint_table(result))

        self._console.print(
            f"Maximum HCPs that can be hosted: {result.hcps_per_node:.2f}",
            style=STYLE_RESULT,
        )
        self._console.print(
            f"Binding resource: {result.binding_resource.value}",
            style=STYLE_RESULT,
        )
        if result.total_hcps_in_cluster is not None and result.node_count is not None:
            self._console.print(
                f"Maximum HCPs in cluster ({format_count(result.node_count)} nodes): "
                f"{result.total_hcps_in_cluster:.2f}",
                style=STYLE_RESULT,
            )
        self._console.print(
            f"Estimated HCP ETCD Storage Requirement: {format_gib(result.etcd_storage_gib)}",
            style=STYLE_RESULT,
        )

        if not result.can_host_hcps:
            self._console.print(
                "The worker node cannot host a single HCP with this capacity "
                f"({format_hcps(result.max_hcps_per_node)} per node).",
                style=STYLE_WARNING,
            )

    @staticmethod
    def to_dict(
        result: SizingResult, discovery: DiscoveryResult | None = None
    ) -> dict[str, Any]:
        """Serializable view of a result for machine-readable output."""
        payload: dict[str, Any] = {
            "max_hcps_per_node": result.max_hcps_per_node,
            "hcps_per_node": result.hcps_per_node,
            "binding_resource": result.binding_resource.value,
            "node_count": result.node_count,
            "total_hcps_in_cluster": result.total_hcps_in_cluster,
            "etcd_storage_gib": result.etcd_storage_gib,
            "terms": {
                # JSON has no infinity; unbounded terms are reported as null.
                name: None if math.isinf(value) else value
                for name, value in result.terms.model_dump().items()
            },
        }
        if discovery is not None:
            payload["discovery"] = {
                "representative": discovery.representative.name,
                "node_count": discovery.node_count,
                "max_pods_defaulted": discovery.max_pods_defaulted,
            }
        return payload

    @classmethod
    def to_json(
        cls, result: SizingResult, discovery: DiscoveryResult | None = None
    ) -> str:
        """JSON document for ``--output json``; unbounded terms are null."""
        return json.dumps(cls.to_dict(result, discovery))

    def render_json(
        self, result: SizingResult, discovery: DiscoveryResult | None = None
    ) -> None:
        self._console.print_json(self.to_json(result, discovery))
