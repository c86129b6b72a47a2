"""Hosted control plane sizing model."""

from hcpsizer.sizing.calculator import (
    DEFAULT_SIZING_CONSTANTS,
    HCPSizingCalculator,
    binding_resource_for,
    compute_constraint_terms,
    estimate_etcd_storage,
    estimate_max_hcps,
    scale_to_cluster,
)

__all__ = [
    "DEFAULT_SIZING_CONSTANTS",
    "HCPSizingCalculator",
    "binding_resource_for",
    "compute_constraint_terms",
    "estimate_etcd_storage",
    "estimate_max_hcps",
    "scale_to_cluster",
]
