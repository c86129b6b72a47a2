"""Cluster controller for node capacity discovery.

Lists control plane nodes through kubectl, parses their allocatable
resources and turns the first node returned into the NodeCapacity the sizing
model consumes.
"""

from __future__ import annotations

import asyncio
import logging
import subprocess
from typing import Any

from hcpsizer.constants.defaults import (
    CONTROL_PLANE_NODE_SELECTOR_DEFAULT,
    DEFAULT_MAX_PODS,
)
from hcpsizer.constants.timeouts import (
    CLUSTER_CHECK_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
)
from hcpsizer.controllers.base import BaseController
from hcpsizer.controllers.cluster.fetchers import NodeFetcher
from hcpsizer.controllers.cluster.parsers import NodeParser
from hcpsizer.models.core.node_info import DiscoveryResult, NodeResourceInfo
from hcpsizer.models.sizing.sizing_models import NodeCapacity

logger = logging.getLogger(__name__)


class ClusterDiscoveryError(Exception):
    """Raised when node capacity cannot be discovered from the cluster."""


class ClusterConnectionError(ClusterDiscoveryError):
    """Raised when the API server does not answer its readiness check."""


class ClusterController(BaseController):
    """Kubernetes node discovery backed by kubectl."""

    SOURCE_NODES = "nodes"

    def __init__(
        self,
        context: str | None = None,
        *,
        kubeconfig: str | None = None,
        label_selector: str = CONTROL_PLANE_NODE_SELECTOR_DEFAULT,
        default_max_pods: int = DEFAULT_MAX_PODS,
    ) -> None:
        """Initialize the cluster controller.

        Args:
            context: Optional Kubernetes context name.
            kubeconfig: Optional kubeconfig path. kubectl falls back to
                $KUBECONFIG and then ~/.kube/config.
            label_selector: Selector for the nodes to size.
            default_max_pods: Pod capacity used when a node does not report one.
        """
        self.context = context
        self.kubeconfig = kubeconfig
        self.label_selector = label_selector
        self.default_max_pods = default_max_pods

        self._node_fetcher = NodeFetcher(self._run_kubectl)
        self._node_parser = NodeParser()

    def _build_command(self, args: tuple[str, ...]) -> list[str]:
        cmd = ["kubectl"]
        if self.kubeconfig:
            cmd.extend(["--kubeconfig", self.kubeconfig])
        if self.context:
            cmd.extend(["--context", self.context])
        cmd.extend(args)
        return cmd

    def _run_kubectl_sync(
        self,
        args: tuple[str, ...],
        timeout: int = KUBECTL_COMMAND_TIMEOUT,
    ) -> str:
        """Run a kubectl command synchronously (thread-safe wrapper target)."""
        result = subprocess.run(
            self._build_command(args), capture_output=True, text=True, timeout=timeout
        )
        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise RuntimeError(stderr or "kubectl command failed")
        return result.stdout

    async def _run_kubectl(self, args: tuple[str, ...]) -> str:
        return await asyncio.to_thread(self._run_kubectl_sync, args)

    async def check_connection(self) -> bool:
        """Check that the API server answers its readiness endpoint."""
        try:
            await self._run_kubectl(
                ("get", "--raw", "/readyz", f"--request-timeout={CLUSTER_CHECK_REQUEST_TIMEOUT}")
            )
        except (OSError, RuntimeError, subprocess.TimeoutExpired) as e:
            logger.debug("Cluster connection check failed: %s", e)
            return False
        return True

    async def fetch_nodes(self) -> list[NodeResourceInfo]:
        """Fetch and parse the nodes matching the label selector.

        Raises:
            ClusterDiscoveryError: If kubectl cannot be run or its output is invalid.
        """
        try:
            raw_nodes = await self._node_fetcher.fetch_control_plane_nodes_raw(
                self.label_selector
            )
        except FileNotFoundError as e:
            raise ClusterDiscoveryError("kubectl not found on PATH") from e
        except subprocess.TimeoutExpired as e:
            raise ClusterDiscoveryError(
                f"kubectl timed out after {e.timeout} seconds"
            ) from e
        except (OSError, RuntimeError, ValueError) as e:
            raise ClusterDiscoveryError(f"Failed to list nodes: {e}") from e

        return [self._node_parser.parse_node_resources(node) for node in raw_nodes]

    async def fetch_all(self) -> dict[str, Any]:
        """Fetch all discovery data keyed by source."""
        return {self.SOURCE_NODES: await self.fetch_nodes()}

    async def connect_and_discover(self) -> DiscoveryResult:
        """Check the API server is reachable, then discover node capacity.

        Raises:
            ClusterConnectionError: If the readiness check fails.
            ClusterDiscoveryError: If discovery fails or no node matches.
        """
        if not await self.check_connection():
            raise ClusterConnectionError("API server is not reachable")
        return await self.discover_node_capacity()

    async def discover_node_capacity(self) -> DiscoveryResult:
        """Discover the capacity of a representative node.

        The first node returned by the listing is the representative. When it
        does not report an allocatable pod capacity, ``default_max_pods`` is
        used and the substitution is logged and flagged on the result.

        Raises:
            ClusterDiscoveryError: If discovery fails or no node matches.
        """
        nodes = (await self.fetch_all())[self.SOURCE_NODES]
        if not nodes:
            raise ClusterDiscoveryError(
                f"No nodes match label selector {self.label_selector!r}"
            )

        representative = nodes[0]
        max_pods_defaulted = representative.max_pods is None
        if max_pods_defaulted:
            logger.warning(
                "Node %s does not report allocatable pods; assuming %d",
                representative.name,
                self.default_max_pods,
            )
            max_pods = self.default_max_pods
        else:
            max_pods = representative.max_pods

        if len(nodes) > 1:
            logger.info(
                "Discovered %d nodes; sizing with %s", len(nodes), representative.name
            )

        return DiscoveryResult(
            nodes=nodes,
            representative=representative,
            node_capacity=NodeCapacity(
                cpu_cores=representative.cpu_cores,
                memory_gib=representative.memory_gib,
                max_pods=max_pods,
            ),
            max_pods_defaulted=max_pods_defaulted,
        )
