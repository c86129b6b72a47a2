"""Node parser for cluster controller - parses node data into sizing records."""

from __future__ import annotations

from typing import Any

from hcpsizer.models.core.node_info import NodeResourceInfo
from hcpsizer.utils.resource_parser import (
    bytes_to_gib,
    memory_str_to_bytes,
    parse_cpu,
    parse_pod_count,
)


class NodeParser:
    """Parses node data into structured formats."""

    def parse_node_resources(self, node: dict[str, Any]) -> NodeResourceInfo:
        """Parse a single node into NodeResourceInfo.

        The allocatable pods value is left as None when it is missing or
        cannot be parsed; substituting a default is the caller's decision.

        Args:
            node: Raw node dictionary from API

        Returns:
            NodeResourceInfo object.
        """
        metadata = node.get("metadata", {})
        status = node.get("status", {})
        spec = node.get("spec", {})

        allocatable = status.get("allocatable", {})
        cpu_cores = parse_cpu(allocatable.get("cpu", "0"))
        memory_gib = bytes_to_gib(memory_str_to_bytes(allocatable.get("memory", "0")))
        max_pods = parse_pod_count(allocatable.get("pods"))

        conditions = {
            c["type"]: c["status"]
            for c in status.get("conditions", [])
            if "type" in c and "status" in c
        }

        return NodeResourceInfo(
            name=metadata.get("name", "Unknown"),
            cpu_cores=cpu_cores,
            memory_gib=memory_gib,
            max_pods=max_pods,
            is_ready=conditions.get("Ready") == "True",
            taints=spec.get("taints", []),
        )
