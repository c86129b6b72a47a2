"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hcpsizer.constants.defaults import (
    CONTROL_PLANE_NODE_SELECTOR_DEFAULT,
    DEFAULT_MAX_PODS,
    LOG_LEVEL_DEFAULT,
)
from hcpsizer.models.sizing.sizing_models import SizingConstants

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_RESERVE_FIELDS = ("control_plane_cpu_reserve", "control_plane_memory_reserve_gib")


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True)

    # Sizing model calibration
    sizing: SizingConstants = Field(default_factory=SizingConstants)
    reserve_platform_control_plane: bool = False

    # Cluster discovery
    kube_context: str = ""
    kubeconfig: str = ""
    node_label_selector: str = CONTROL_PLANE_NODE_SELECTOR_DEFAULT
    default_max_pods: int = Field(default=DEFAULT_MAX_PODS, gt=0)

    # Logging
    log_level: str = LOG_LEVEL_DEFAULT  # DEBUG|INFO|WARNING|ERROR

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    def effective_sizing_constants(self) -> SizingConstants:
        """Sizing constants with the platform reserve applied when requested.

        The preset fills each reserve that ``sizing`` leaves at zero; a
        non-zero reserve in ``sizing`` is kept as configured.
        """
        if not self.reserve_platform_control_plane:
            return self.sizing
        preset = SizingConstants.with_platform_reserve()
        updates = {
            name: getattr(preset, name)
            for name in _RESERVE_FIELDS
            if not getattr(self.sizing, name)
        }
        if not updates:
            return self.sizing
        return self.sizing.model_copy(update=updates)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""
