"""Utility functions for pathgeom.

This module provides utility functions including:

- Logging setup and configuration
- Conversion statistics
"""

from pathgeom.utils.logging import (
    ConversionLogger,
    ConversionStats,
    configure_console_logging,
    configure_logging,
)

__all__ = [
    "ConversionLogger",
    "ConversionStats",
    "configure_console_logging",
    "configure_logging",
]
