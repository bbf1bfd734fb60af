"""
YAML-based settings for the report and the dashboard.

reading configs/settings.yaml. Every key is optional - anything missing
falls back to the defaults below.
"""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import yaml

from .logging_config import get_logger

logger = get_logger(__name__)

# Relative data paths in the settings file are resolved against the project root
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
# Default settings file, next to this module
DEFAULT_SETTINGS_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "settings.yaml")


class ConfigError(Exception):
    """
    Raised when the settings file exists but can't be used.

    Example:
        raise ConfigError("report.top_n must be a positive integer")
    """

    pass


@dataclass
class ReportSettings:
    """Which clients the report asks about, and how many top transactions to list."""

    sender_name: str = "Tom Shelby"
    client_name: str = "Aunt Polly"
    top_n: int = 3


@dataclass
class Settings:
    """Top-level settings."""

    data_path: str = "data/transactions.json"
    report: ReportSettings = field(default_factory=ReportSettings)

    def data_file(self) -> str:
        """data_path as an absolute path (relative paths start at the project root)."""
        if os.path.isabs(self.data_path):
            return self.data_path
        return os.path.join(PROJECT_ROOT, self.data_path)


def load_settings(config_path: Optional[str] = None) -> Settings:
    """
    loading settings from a YAML file.

    Args:
        config_path: Path to settings.yaml (optional, uses configs/settings.yaml if not provided)

    Returns:
        Settings with defaults filled in for missing keys

    Raises:
        ConfigError: If the YAML can't be parsed or a value has the wrong type
    """
    if config_path is None:
        config_path = DEFAULT_SETTINGS_PATH

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning(f"Settings file not found: {config_path} - using defaults")
        return Settings()
    except yaml.YAMLError as e:
        logger.error(f"Error parsing YAML settings: {e}")
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Settings file {config_path} must contain a mapping")

    settings = _build_settings(raw)
    logger.debug(f"Loaded settings from {config_path}: {settings}")
    return settings


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================


def _build_settings(raw: Dict[str, Any]) -> Settings:
    """turning the raw YAML mapping into a Settings object."""
    defaults = Settings()

    data_path = raw.get("data_path", defaults.data_path)
    if not isinstance(data_path, str) or not data_path:
        raise ConfigError("data_path must be a non-empty string")

    report_raw = raw.get("report") or {}
    if not isinstance(report_raw, dict):
        raise ConfigError("report must be a mapping")

    report = ReportSettings(
        sender_name=report_raw.get("sender_name", defaults.report.sender_name),
        client_name=report_raw.get("client_name", defaults.report.client_name),
        top_n=report_raw.get("top_n", defaults.report.top_n),
    )

    for key in ("sender_name", "client_name"):
        if not isinstance(getattr(report, key), str):
            raise ConfigError(f"report.{key} must be a string")

    # bool is a subclass of int, so rule it out explicitly
    if (
        not isinstance(report.top_n, int)
        or isinstance(report.top_n, bool)
        or report.top_n < 1
    ):
        raise ConfigError("report.top_n must be a positive integer")

    return Settings(data_path=data_path, report=report)
