"""Configuration settings for pathgeom."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from pathgeom.domain.path import FillRule


class HolePredicateKind(str, Enum):
    """Rule deciding whether a ring extends the current shell's hole list."""

    ORIENTATION = "orientation"
    CONTAINMENT = "containment"


class OutputFormat(str, Enum):
    """Serialization format for converted geometry."""

    WKT = "wkt"
    GEOJSON = "geojson"


class ReaderConfig(BaseModel):
    """Configuration for path reconstruction."""

    fill_rule: FillRule | None = Field(
        default=None,
        description="Override the fill rule carried by the path (None = use path's)",
    )
    filled: bool = Field(
        default=True,
        description="Whether figures built by the input adapters participate in filling",
    )
    hole_predicate: HolePredicateKind = Field(
        default=HolePredicateKind.ORIENTATION,
        description="How rings following a shell are recognized as its holes",
    )


class FlattenConfig(BaseModel):
    """Configuration for the optional curve flattening pre-pass."""

    tolerance: float = Field(
        default=0.25,
        ge=0.001,
        le=10.0,
        description="Maximum distance between a curve and its flattened polyline",
    )


class ProcessingConfig(BaseModel):
    """Configuration for batch conversion."""

    max_workers: int | None = Field(
        default=None,
        description="Max worker processes (None = auto)",
    )
    skip_empty: bool = Field(
        default=True,
        description="Skip glyphs without outlines",
    )


class OutputConfig(BaseModel):
    """Configuration for serialized output."""

    format: OutputFormat = Field(
        default=OutputFormat.WKT,
        description="Output format",
    )
    precision: int = Field(
        default=6,
        ge=0,
        le=17,
        description="Decimal places for WKT output",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class PathGeomSettings(BaseModel):
    """Main application settings."""

    reader: ReaderConfig = Field(default_factory=ReaderConfig)
    flatten: FlattenConfig = Field(default_factory=FlattenConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PathGeomSettings:
    """Get default application settings."""
    return PathGeomSettings()
