"""Command-line interface for pathgeom.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Convert SVG path data to WKT or GeoJSON
- Convert font glyphs to a GeoJSON FeatureCollection
- Progress bars for glyph conversion
- Detailed error reporting
"""

from pathgeom.cli.app import cli, main

__all__ = ["cli", "main"]
