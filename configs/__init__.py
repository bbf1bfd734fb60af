"""Project configuration: logging and YAML settings."""

from .logging_config import setup_logging, get_logger
from .settings import ConfigError, ReportSettings, Settings, load_settings

__all__ = [
    "setup_logging",
    "get_logger",
    "ConfigError",
    "ReportSettings",
    "Settings",
    "load_settings",
]
