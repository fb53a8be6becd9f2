"""Logging utilities for pathgeom."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import structlog


@dataclass
class ConversionStats:
    """Statistics from a conversion run."""

    converted_count: int = 0
    skipped_count: int = 0
    error_count: int = 0
    points: int = 0
    lines: int = 0
    polygons: int = 0
    clusters: int = 0
    degenerate_clusters: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    path_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate conversion duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_path_time_ms(self) -> float | None:
        """Average conversion time per path."""
        if not self.path_timings_ms:
            return None
        return sum(self.path_timings_ms) / len(self.path_timings_ms)

    def merge(self, other: "ConversionStats") -> None:
        """Add the geometry counts of another run to this one."""
        self.points += other.points
        self.lines += other.lines
        self.polygons += other.polygons
        self.clusters += other.clusters
        self.degenerate_clusters += other.degenerate_clusters

    def to_dict(self) -> dict[str, int]:
        """Serialize geometry counts for IPC."""
        return {
            "points": self.points,
            "lines": self.lines,
            "polygons": self.polygons,
            "clusters": self.clusters,
            "degenerate_clusters": self.degenerate_clusters,
        }

    @classmethod
    def from_dict(cls, data: dict[str, int]) -> "ConversionStats":
        """Deserialize geometry counts."""
        return cls(**data)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (auto-generated if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    if log_file is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = Path(f"pathgeom_{timestamp}.log")

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(getattr(logging, file_level.upper()))
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    _configure_structlog()

    logger = structlog.get_logger("pathgeom")
    logger.info("Logging initialized", log_file=str(log_file), level=file_level)

    return logger


def configure_console_logging(level: str = "WARNING") -> None:
    """Configure console-only structured logging.

    Records go through the standard library root logger to stderr, so
    command output on stdout stays clean.

    Args:
        level: Logging level for console output
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    if not root_logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    _configure_structlog()


def _configure_structlog() -> None:
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


class ConversionLogger:
    """Logger for tracking conversion progress and statistics."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        stats: ConversionStats | None = None,
    ) -> None:
        self._logger = logger or structlog.get_logger("pathgeom")
        self._stats = stats or ConversionStats()

    def log_point(self) -> None:
        """Count an emitted point."""
        self._stats.points += 1

    def log_line(self) -> None:
        """Count an emitted line string."""
        self._stats.lines += 1

    def log_cluster_resolved(self, holes: int, polygons: int) -> None:
        """Log a ring cluster that produced polygons."""
        self._logger.debug("Cluster resolved", holes=holes, polygons=polygons)
        self._stats.clusters += 1
        self._stats.polygons += polygons

    def log_cluster_degenerate(self, holes: int, reason: str) -> None:
        """Log a ring cluster that produced no polygon."""
        self._logger.debug("Cluster degenerate", holes=holes, reason=reason)
        self._stats.clusters += 1
        self._stats.degenerate_clusters += 1

    def log_path_complete(self, name: str, duration_ms: float) -> None:
        """Log successful conversion of a named path."""
        self._logger.info(
            "Path converted",
            path=name,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.converted_count += 1
        self._stats.path_timings_ms.append(duration_ms)

    def log_path_skipped(self, name: str, reason: str) -> None:
        """Log skipped path."""
        self._logger.debug("Path skipped", path=name, reason=reason)
        self._stats.skipped_count += 1

    def log_path_error(
        self,
        name: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log path conversion error."""
        self._logger.error(
            "Path conversion failed",
            path=name,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((name, str(error)))

    @property
    def stats(self) -> ConversionStats:
        """Get current conversion statistics."""
        return self._stats
