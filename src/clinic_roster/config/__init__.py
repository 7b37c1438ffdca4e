"""Config module.

This module provides configuration management functionality.
"""

from clinic_roster.config.manager import load_config
from clinic_roster.config.schema import (
    ClinicConfig,
    Config,
    ExportConfig,
    LoggingConfig,
)

__all__ = [
    "load_config",
    "Config",
    "ClinicConfig",
    "ExportConfig",
    "LoggingConfig",
]
