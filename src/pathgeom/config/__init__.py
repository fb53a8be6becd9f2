"""Configuration management for pathgeom.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ReaderConfig: Reconstruction settings (fill rule override, hole predicate)
- FlattenConfig: Curve flattening settings
- ProcessingConfig: Batch conversion settings
- OutputConfig: Serialization settings
- LoggingConfig: Logging settings
- PathGeomSettings: Main application settings
"""

from pathgeom.config.settings import (
    FlattenConfig,
    HolePredicateKind,
    LoggingConfig,
    OutputConfig,
    OutputFormat,
    PathGeomSettings,
    ProcessingConfig,
    ReaderConfig,
    get_default_settings,
)

__all__ = [
    "FlattenConfig",
    "HolePredicateKind",
    "LoggingConfig",
    "OutputConfig",
    "OutputFormat",
    "PathGeomSettings",
    "ProcessingConfig",
    "ReaderConfig",
    "get_default_settings",
]
