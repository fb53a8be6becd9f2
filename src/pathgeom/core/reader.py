"""Conversion of vector paths into planar geometry.

``PathGeometryReader`` runs the whole reconstruction in one linear pass:

1. Extract a coordinate sequence per figure (Y inverted)
2. Classify figures as points, lines or ring clusters
3. Resolve each ring cluster into polygons as soon as it is complete
4. Build one geometry from everything emitted, in input order

Extraction problems are fatal and raised. A ring cluster that cannot be
resolved only drops out of the result.
"""

from shapely.geometry import LineString, Point
from shapely.geometry.base import BaseGeometry

from pathgeom.core.builder import build_geometry
from pathgeom.core.classifier import (
    HolePredicate,
    LineItem,
    PointItem,
    RingClassifier,
    counter_clockwise_hole,
)
from pathgeom.core.extractor import FigureExtractor
from pathgeom.core.flatten import flatten_path
from pathgeom.core.kernel import GeometryKernel
from pathgeom.core.resolver import Degenerate, PolygonResolver
from pathgeom.domain import FillRule, PathGeometry
from pathgeom.io.svg import parse_svg_path
from pathgeom.utils.logging import ConversionLogger, ConversionStats


class PathGeometryReader:
    """Converts flat vector paths into shapely geometry.

    The reader holds no per-conversion state, so one instance can serve
    concurrent calls as long as its kernel is stateless (the default one is).

    Example:
        reader = PathGeometryReader()
        geometry = reader.read(path)
    """

    def __init__(
        self,
        kernel: GeometryKernel | None = None,
        hole_predicate: HolePredicate = counter_clockwise_hole,
        fill_rule: FillRule | None = None,
    ) -> None:
        """Initialize the reader.

        Args:
            kernel: Noding, polygonization and union primitives
                (default: shapely)
            hole_predicate: Predicate deciding whether a ring is a hole of
                the preceding shell
            fill_rule: Fill rule overriding the one carried by each path
        """
        self.extractor = FigureExtractor()
        self.classifier = RingClassifier(hole_predicate)
        self.resolver = PolygonResolver(kernel)
        self.fill_rule = fill_rule

    def read_geometries(
        self, path: PathGeometry, stats: ConversionStats | None = None
    ) -> list[BaseGeometry]:
        """Convert a path into its points, line strings and polygons.

        Args:
            path: Flat path to convert
            stats: Statistics to update (optional)

        Returns:
            Geometries in input order

        Raises:
            NonLinearGeometryError: If the path may contain curves
            UnsupportedSegmentKindError: If a segment is not a straight line
        """
        fill_rule = self.fill_rule or path.fill_rule
        conversion_logger = ConversionLogger(stats=stats)
        sub_figures = self.extractor.extract(path)

        geometries: list[BaseGeometry] = []
        for item in self.classifier.classify(sub_figures):
            if isinstance(item, PointItem):
                geometries.append(Point(item.coordinate.to_tuple()))
                conversion_logger.log_point()
            elif isinstance(item, LineItem):
                geometries.append(LineString([c.to_tuple() for c in item.coordinates]))
                conversion_logger.log_line()
            else:
                result = self.resolver.resolve(item, fill_rule)
                if isinstance(result, Degenerate):
                    conversion_logger.log_cluster_degenerate(
                        holes=len(item.holes), reason=result.error.reason
                    )
                else:
                    conversion_logger.log_cluster_resolved(
                        holes=len(item.holes), polygons=len(result.polygons)
                    )
                geometries.extend(result.polygons)

        return geometries

    def read(self, path: PathGeometry, stats: ConversionStats | None = None) -> BaseGeometry:
        """Convert a flat path into one geometry.

        Args:
            path: Flat path to convert
            stats: Statistics to update (optional)

        Returns:
            A single Point/LineString/Polygon, a Multi* geometry, or a
            GeometryCollection (empty if nothing survived)

        Raises:
            NonLinearGeometryError: If the path may contain curves
            UnsupportedSegmentKindError: If a segment is not a straight line
        """
        return build_geometry(self.read_geometries(path, stats))

    def read_flattened(
        self,
        path: PathGeometry,
        tolerance: float = 0.25,
        stats: ConversionStats | None = None,
    ) -> BaseGeometry:
        """Flatten curves in a path, then convert it.

        Args:
            path: Path possibly containing curves
            tolerance: Maximum distance between a curve and its polyline
            stats: Statistics to update (optional)

        Returns:
            Converted geometry
        """
        return self.read(flatten_path(path, tolerance), stats)


def read_path(path: PathGeometry, kernel: GeometryKernel | None = None) -> BaseGeometry:
    """Convert a flat path with default settings."""
    return PathGeometryReader(kernel=kernel).read(path)


def read_svg_path(
    d: str,
    fill_rule: FillRule | str = FillRule.EVEN_ODD,
    filled: bool = True,
    tolerance: float | None = None,
) -> BaseGeometry:
    """Convert SVG path data into geometry.

    Args:
        d: SVG path data
        fill_rule: Fill rule (``"evenodd"`` or ``"nonzero"``)
        filled: Whether the subpaths are filled
        tolerance: Flatten curves with this tolerance first (None = path
            must be flat)

    Returns:
        Converted geometry

    Raises:
        PathParseError: If the path data is malformed
        NonLinearGeometryError: If the path has curves and no tolerance was
            given
    """
    path = parse_svg_path(d, fill_rule=fill_rule, filled=filled)
    reader = PathGeometryReader()
    if tolerance is not None:
        return reader.read_flattened(path, tolerance)
    return reader.read(path)
