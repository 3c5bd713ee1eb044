"""Utility functions for typofonts.

This module provides utility functions including:

- Logging setup and configuration
- Scan progress and statistics tracking
"""

from typofonts.utils.logging import (
    ScanLogger,
    ScanStats,
    configure_logging,
)

__all__ = [
    "ScanLogger",
    "ScanStats",
    "configure_logging",
]
