"""Node fetcher for cluster controller - fetches node objects from the cluster."""

from __future__ import annotations

import json
import logging
from typing import Any

from hcpsizer.constants.defaults import CONTROL_PLANE_NODE_SELECTOR_DEFAULT
from hcpsizer.constants.timeouts import CLUSTER_REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class NodeFetcher:
    """Fetches node data from Kubernetes cluster."""

    _NODE_QUERY_TIMEOUT = CLUSTER_REQUEST_TIMEOUT

    def __init__(self, run_kubectl_func: Any) -> None:
        """Initialize with kubectl runner function.

        Args:
            run_kubectl_func: Async function to run kubectl commands
        """
        self._run_kubectl = run_kubectl_func

    def _build_nodes_args(self, label_selector: str) -> tuple[str, ...]:
        """Build the node listing query arguments."""
        args: list[str] = ["get", "nodes"]
        if label_selector:
            args.extend(["-l", label_selector])
        args.extend(["-o", "json", f"--request-timeout={self._NODE_QUERY_TIMEOUT}"])
        return tuple(args)

    async def fetch_control_plane_nodes_raw(
        self,
        label_selector: str = CONTROL_PLANE_NODE_SELECTOR_DEFAULT,
    ) -> list[dict[str, Any]]:
        """Fetch node objects matching the label selector.

        Args:
            label_selector: kubectl label selector for the nodes to size.

        Returns:
            List of raw node dictionaries in the order the API returned them.

        Raises:
            ValueError: If kubectl output is not a node list.
        """
        output = await self._run_kubectl(self._build_nodes_args(label_selector))
        try:
            data = json.loads(output)
        except json.JSONDecodeError as e:
            raise ValueError(f"kubectl returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ValueError("kubectl returned an unexpected node list")
        items = data.get("items", [])
        if not isinstance(items, list):
            raise ValueError("kubectl returned an unexpected node list")

        logger.debug("Fetched %d nodes matching %r", len(items), label_selector)
        return [item for item in items if isinstance(item, dict)]
