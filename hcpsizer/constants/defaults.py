"""Default values for settings.

All default values used in the AppSettings model and discovery fallbacks.
"""

from typing import Final

# ============================================================================
# Discovery defaults
# ============================================================================

DEFAULT_MAX_PODS: Final = 250
CONTROL_PLANE_NODE_SELECTOR_DEFAULT: Final = "node-role.kubernetes.io/control-plane="

# ============================================================================
# Settings file
# ============================================================================

CONFIG_PATH_ENV_VAR: Final = "HCP_SIZER_CONFIG"
CONFIG_DIR_NAME: Final = "hcp-sizer"
CONFIG_FILE_NAME: Final = "settings.yaml"

# ============================================================================
# CLI defaults
# ============================================================================

LOG_LEVEL_DEFAULT: Final = "WARNING"
OUTPUT_FORMAT_DEFAULT: Final = "text"

__all__ = [
    "CONFIG_DIR_NAME",
    "CONFIG_FILE_NAME",
    "CONFIG_PATH_ENV_VAR",
    "CONTROL_PLANE_NODE_SELECTOR_DEFAULT",
    "DEFAULT_MAX_PODS",
    "LOG_LEVEL_DEFAULT",
    "OUTPUT_FORMAT_DEFAULT",
]
