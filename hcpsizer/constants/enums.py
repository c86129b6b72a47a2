"""All enum definitions for the sizer.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Sizing Enums
# =============================================================================

class BindingResource(Enum):
    """Resource dimension whose constraint determines the HCP count."""

    CPU = "CPU"
    MEMORY = "Memory"
    PODS = "Pods"


class CalculationMethod(Enum):
    """Sizing strategy selected by the operator."""

    REQUEST_BASED = "request-based"
    LOAD_BASED = "load-based"


# =============================================================================
# Output Enums
# =============================================================================

class OutputFormat(Enum):
    """Result rendering formats supported by the CLI."""

    TEXT = "text"
    JSON = "json"
