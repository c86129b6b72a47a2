"""Console configuration - prompt labels, method choices, and table column definitions."""

from __future__ import annotations

from hcpsizer.constants.enums import CalculationMethod

# =============================================================================
# Prompt Labels
# =============================================================================

PROMPT_WORKER_CPUS = "Enter the number of vCPUs on the worker node"
PROMPT_WORKER_MEMORY = "Enter the memory (in GiB) on the worker node"
PROMPT_MAX_PODS = "Enter the maximum number of pods on the worker node (usually 250 or 500)"
PROMPT_POD_COUNT = (
    "Enter the number of pods you plan to run on your cluster (for ETCD storage calculation)"
)
PROMPT_NODE_COUNT = "Enter the number of worker nodes in the cluster"
PROMPT_CALCULATION_METHOD = "Select Calculation Method"
PROMPT_API_RATE = "Enter the estimated API rate (QPS)"

INVALID_NUMBER_MESSAGE = "[prompt.invalid]Please enter a valid number"

METHOD_CHOICES: list[str] = [method.value for method in CalculationMethod]
METHOD_DEFAULT = CalculationMethod.REQUEST_BASED.value

# =============================================================================
# Table Column Definitions: list[tuple[str, str]] = [(name, justify), ...]
# =============================================================================

NODE_TABLE_COLUMNS: list[tuple[str, str]] = [
    ("Name", "left"),
    ("vCPU", "right"),
    ("Memory (GiB)", "right"),
    ("Max Pods", "right"),
    ("Ready", "center"),
]

CONSTRAINT_TABLE_COLUMNS: list[tuple[str, str]] = [
    ("Constraint", "left"),
    ("Max HCPs", "right"),
]

# Row label for each ConstraintTerms field, in display order.
CONSTRAINT_ROW_LABELS: dict[str, str] = {
    "by_cpu": "CPU (requests)",
    "by_cpu_usage": "CPU (usage)",
    "by_memory": "Memory (requests)",
    "by_memory_usage": "Memory (usage)",
    "by_pods": "Pods",
}
