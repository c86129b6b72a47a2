"""Init file for fetchers module."""

from hcpsizer.controllers.cluster.fetchers.node_fetcher import NodeFetcher

__all__ = ["NodeFetcher"]
