"""Configuration management for typofonts.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults. The font
parser itself takes no configuration; these settings only shape batch
scanning and logging.

Key classes:
- ScanConfig: Batch scanning settings
- LoggingConfig: Logging settings
- TypofontsSettings: Main application settings
"""

from typofonts.config.settings import (
    DEFAULT_EXTENSIONS,
    LoggingConfig,
    ScanConfig,
    TypofontsSettings,
    get_default_settings,
)

__all__ = [
    "DEFAULT_EXTENSIONS",
    "LoggingConfig",
    "ScanConfig",
    "TypofontsSettings",
    "get_default_settings",
]
