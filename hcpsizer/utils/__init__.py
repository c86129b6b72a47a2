"""Utility functions for the HCP sizer."""

from hcpsizer.utils.resource_parser import (
    bytes_to_gib,
    memory_str_to_bytes,
    parse_cpu,
    parse_pod_count,
)

__all__ = [
    "bytes_to_gib",
    "memory_str_to_bytes",
    "parse_cpu",
    "parse_pod_count",
]
