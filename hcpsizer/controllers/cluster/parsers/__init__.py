"""Init file for parsers module."""

from hcpsizer.controllers.cluster.parsers.node_parser import NodeParser

__all__ = ["NodeParser"]
