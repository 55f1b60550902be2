"""Project settings for hexevents (``[tool.hexevents]`` in pyproject.toml)."""

from hexevents.kernel.config.loader import (
    CONFIG_PATH_ENV,
    apply_config,
    clear_config_cache,
    load_config,
)
from hexevents.kernel.config.models import AttacherConfig, HexEventsConfig, LoggingConfig

__all__ = [
    "CONFIG_PATH_ENV",
    "AttacherConfig",
    "HexEventsConfig",
    "LoggingConfig",
    "apply_config",
    "clear_config_cache",
    "load_config",
]
