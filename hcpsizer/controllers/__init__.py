"""Controllers module for the HCP sizer.

This module provides controllers for discovering worker node capacity from a
Kubernetes cluster.
"""

from __future__ import annotations

# Base classes
from hcpsizer.controllers.base import BaseController

# Cluster domain
from hcpsizer.controllers.cluster.controller import (
    ClusterConnectionError,
    ClusterController,
    ClusterDiscoveryError,
)

__all__ = [
    "BaseController",
    "ClusterConnectionError",
    "ClusterController",
    "ClusterDiscoveryError",
]
