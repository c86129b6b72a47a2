"""Node discovery models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from hcpsizer.models.sizing.sizing_models import NodeCapacity


class NodeResourceInfo(BaseModel):
    """Allocatable resources read from a single node object."""

    name: str
    cpu_cores: float
    memory_gib: float
    max_pods: int | None = None  # None when allocatable pods is missing or unparsable
    is_ready: bool = False
    taints: list[dict[str, Any]] = []


class DiscoveryResult(BaseModel):
    """Nodes returned by discovery and the capacity derived from the representative."""

    nodes: list[NodeResourceInfo]
    representative: NodeResourceInfo
    node_capacity: NodeCapacity
    max_pods_defaulted: bool = False

    @property
    def node_count(self) -> int:
        return len(self.nodes)
