"""Constants module for the HCP sizer.

Centralized constants organized by domain:
- sizing.py: Calibrated per-HCP sizing and etcd regression constants
- enums.py: All Enum class definitions
- values.py: Scalar display constants (strings with Final)
- timeouts.py: kubectl timeout values
- defaults.py: Default values for settings and discovery
"""

from hcpsizer.constants.defaults import (
    CONTROL_PLANE_NODE_SELECTOR_DEFAULT,
    DEFAULT_MAX_PODS,
    LOG_LEVEL_DEFAULT,
)
from hcpsizer.constants.enums import (
    BindingResource,
    CalculationMethod,
    OutputFormat,
)
from hcpsizer.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
)
from hcpsizer.constants.values import (
    APP_DESCRIPTION,
    APP_NAME,
    QPS_QUERY,
)

__all__ = [
    # Application
    "APP_DESCRIPTION",
    "APP_NAME",
    "QPS_QUERY",
    # Defaults
    "CONTROL_PLANE_NODE_SELECTOR_DEFAULT",
    "DEFAULT_MAX_PODS",
    "LOG_LEVEL_DEFAULT",
    # Timeouts
    "CLUSTER_REQUEST_TIMEOUT",
    "KUBECTL_COMMAND_TIMEOUT",
    # Enums
    "BindingResource",
    "CalculationMethod",
    "OutputFormat",
]
