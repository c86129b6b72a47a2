"""Init file for cluster module."""

from hcpsizer.controllers.cluster.controller import (
    ClusterConnectionError,
    ClusterController,
    ClusterDiscoveryError,
)
from hcpsizer.controllers.cluster.fetchers import NodeFetcher
from hcpsizer.controllers.cluster.parsers import NodeParser

__all__ = [
    "ClusterConnectionError",
    "ClusterController",
    "ClusterDiscoveryError",
    "NodeFetcher",
    "NodeParser",
]
