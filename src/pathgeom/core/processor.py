"""Parallel batch conversion of many paths.

This module converts independent paths (typically all glyphs of a font) in
worker processes using ProcessPoolExecutor.

Key components:
- convert_path: Top-level picklable function for parallel execution
- PathBatchConverter: Converts a mapping of named paths
- FontConverter: Reads a font and converts its glyphs
"""

import time
import traceback
from collections.abc import Callable, Mapping
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Any

from shapely import wkb
from shapely.geometry.base import BaseGeometry

from pathgeom.config import PathGeomSettings, ReaderConfig
from pathgeom.core.classifier import hole_predicate_for
from pathgeom.core.reader import PathGeometryReader
from pathgeom.domain import PathGeometry
from pathgeom.io import FontReader
from pathgeom.utils import (
    ConversionLogger,
    ConversionStats,
    configure_console_logging,
    configure_logging,
)

ProgressCallback = Callable[[int, int, str, bool], None]


def convert_path(
    name: str,
    path_dict: dict[str, Any],
    reader_dict: dict[str, Any],
    tolerance: float | None = None,
) -> dict[str, Any]:
    """Convert a single serialized path.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.
    Deserializes the path, flattens it if a tolerance is given, converts it
    and returns the geometry as WKB.

    Args:
        name: Name of the path (for error reporting)
        path_dict: Serialized path (from PathGeometry.to_dict())
        reader_dict: Serialized reader configuration
        tolerance: Curve flattening tolerance (None = path must be flat)

    Returns:
        Dictionary containing either:
        - Success: {"name": str, "wkb": bytes, "stats": dict, "duration_ms": float}
        - Error: {"name": str, "error": str, "traceback": str, "duration_ms": float}
    """
    start_time = time.time()

    try:
        path = PathGeometry.from_dict(path_dict)
        config = ReaderConfig(**reader_dict)

        reader = PathGeometryReader(
            hole_predicate=hole_predicate_for(config.hole_predicate),
            fill_rule=config.fill_rule,
        )
        stats = ConversionStats()
        if tolerance is not None:
            geometry = reader.read_flattened(path, tolerance, stats)
        else:
            geometry = reader.read(path, stats)

        duration_ms = (time.time() - start_time) * 1000
        return {
            "name": name,
            "wkb": wkb.dumps(geometry),
            "stats": stats.to_dict(),
            "duration_ms": duration_ms,
        }

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        return {
            "name": name,
            "error": str(e),
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


class PathBatchConverter:
    """Converts named paths in parallel worker processes.

    Example:
        converter = PathBatchConverter(PathGeomSettings())
        geometries, stats = converter.convert({"a": path_a, "b": path_b})
    """

    def __init__(self, config: PathGeomSettings, log: bool = False) -> None:
        """Initialize the batch converter.

        Args:
            config: pathgeom settings
            log: Configure file logging from ``config.logging``
        """
        self.config = config
        if log:
            self.logger = configure_logging(
                log_file=config.logging.log_file,
                console_level=config.logging.log_level,
                file_level=config.logging.file_log_level,
                quiet=True,
            )
        else:
            self.logger = None

    def convert(
        self,
        paths: Mapping[str, PathGeometry],
        max_workers: int | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> tuple[dict[str, BaseGeometry], ConversionStats]:
        """Convert paths in parallel.

        Failed paths are logged and counted; they are missing from the
        returned mapping.

        Args:
            paths: Path per name
            max_workers: Maximum worker processes (None = config, then auto)
            progress_callback: Optional callback(completed, total, name, success)

        Returns:
            Tuple of (geometry per name in input order, statistics)
        """
        stats = ConversionStats()
        stats.start_time = time.time()
        conversion_logger = ConversionLogger(self.logger, stats)

        if max_workers is None:
            max_workers = self.config.processing.max_workers

        reader_dict = self.config.reader.model_dump()
        tolerance = self.config.flatten.tolerance
        results: dict[str, BaseGeometry] = {}

        tasks: dict[str, dict[str, Any]] = {}
        for name, path in paths.items():
            if self.config.processing.skip_empty and path.is_empty():
                conversion_logger.log_path_skipped(name, "empty path")
                continue
            tasks[name] = path.to_dict()

        total = len(tasks)
        completed = 0

        if tasks:
            with ProcessPoolExecutor(
                max_workers=max_workers,
                initializer=configure_console_logging,
                initargs=(self.config.logging.log_level,),
            ) as executor:
                pending = {
                    executor.submit(convert_path, name, path_dict, reader_dict, tolerance): name
                    for name, path_dict in tasks.items()
                }

                try:
                    for future in as_completed(pending):
                        name = pending[future]
                        success = False

                        try:
                            result = future.result()
                        except Exception as e:
                            conversion_logger.log_path_error(name, e, traceback.format_exc())
                        else:
                            if "error" in result:
                                conversion_logger.log_path_error(
                                    name, Exception(result["error"]), result.get("traceback")
                                )
                            else:
                                success = True
                                results[name] = wkb.loads(result["wkb"])
                                stats.merge(ConversionStats.from_dict(result["stats"]))
                                conversion_logger.log_path_complete(name, result["duration_ms"])

                        completed += 1
                        if progress_callback is not None:
                            progress_callback(completed, total, name, success)

                except KeyboardInterrupt:
                    executor.shutdown(wait=True, cancel_futures=True)
                    raise

        stats.end_time = time.time()
        ordered = {name: results[name] for name in tasks if name in results}
        return ordered, stats


class FontConverter:
    """Converts the glyphs of a font into geometry.

    Example:
        converter = FontConverter(PathGeomSettings())
        geometries, stats = converter.convert(Path("font.ttf"), ["A", "B"])
    """

    def __init__(self, config: PathGeomSettings, log: bool = False) -> None:
        self.config = config
        self.batch = PathBatchConverter(config, log=log)

    def convert(
        self,
        font_path: Path,
        glyph_names: list[str] | None = None,
        max_workers: int | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> tuple[dict[str, BaseGeometry], ConversionStats]:
        """Convert glyphs of a font.

        Args:
            font_path: Path to the TTF/OTF font
            glyph_names: Glyphs to convert (default: all glyphs)
            max_workers: Maximum worker processes
            progress_callback: Optional callback(completed, total, name, success)

        Returns:
            Tuple of (geometry per glyph name, statistics)

        Raises:
            FileNotFoundError: If font file does not exist
            GlyphNotFoundError: If a requested glyph does not exist
        """
        with FontReader(font_path) as reader:
            paths = dict(reader.iter_glyph_paths(glyph_names))

        return self.batch.convert(paths, max_workers, progress_callback)
