"""Sizing input, configuration and result models."""

from hcpsizer.models.sizing.sizing_models import (
    ConstraintTerms,
    NodeCapacity,
    SizingConstants,
    SizingRequest,
    SizingResult,
    WorkloadSignal,
)

__all__ = [
    "ConstraintTerms",
    "NodeCapacity",
    "SizingConstants",
    "SizingRequest",
    "SizingResult",
    "WorkloadSignal",
]
