"""Data models for the HCP sizer."""

from hcpsizer.models.core import DiscoveryResult, NodeResourceInfo
from hcpsizer.models.sizing import (
    ConstraintTerms,
    NodeCapacity,
    SizingConstants,
    SizingRequest,
    SizingResult,
    WorkloadSignal,
)

__all__ = [
    "ConstraintTerms",
    "DiscoveryResult",
    "NodeCapacity",
    "NodeResourceInfo",
    "SizingConstants",
    "SizingRequest",
    "SizingResult",
    "WorkloadSignal",
]
