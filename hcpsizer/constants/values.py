"""Scalar constants for the sizer.

Application-level strings shown by the CLI with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_NAME: Final = "hcp-sizer"
APP_DESCRIPTION: Final = "An HCP Sizing Calculator based on Science!"

# ============================================================================
# Load-based hint (rich markup)
# ============================================================================

QPS_HINT: Final = "Hint: Run the following query in an existing cluster to estimate your QPS:"
QPS_QUERY: Final = (
    'sum(rate(apiserver_request_total{namespace=~"clusters-$name*"}[2m])) by (namespace)'
)

# ============================================================================
# Styles
# ============================================================================

STYLE_HINT: Final = "italic green"
STYLE_RESULT: Final = "italic yellow"
STYLE_WARNING: Final = "bold red"
STYLE_NOTE: Final = "yellow"

__all__ = [
    "APP_DESCRIPTION",
    "APP_NAME",
    "QPS_HINT",
    "QPS_QUERY",
    "STYLE_HINT",
    "STYLE_NOTE",
    "STYLE_RESULT",
    "STYLE_WARNING",
]
