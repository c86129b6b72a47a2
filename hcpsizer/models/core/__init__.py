"""Cluster node models."""

from hcpsizer.models.core.node_info import DiscoveryResult, NodeResourceInfo

__all__ = ["DiscoveryResult", "NodeResourceInfo"]
