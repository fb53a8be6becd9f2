"""Unit tests for PathGeometryReader."""

import pytest
from shapely.geometry import GeometryCollection, LineString, Point, Polygon

from pathgeom.core.classifier import contained_in_shell
from pathgeom.core.kernel import GeometryKernel
from pathgeom.core.reader import PathGeometryReader, read_path, read_svg_path
from pathgeom.domain import (
    BezierSegment,
    FillRule,
    LineSegment,
    PathFigure,
    PathGeometry,
)
from pathgeom.exceptions import NonLinearGeometryError, PathParseError
from pathgeom.utils import ConversionStats


def figure(*points: tuple[float, float], closed: bool = True, filled: bool = True) -> PathFigure:
    start, *rest = points
    return PathFigure(start, [LineSegment(p) for p in rest], is_closed=closed, is_filled=filled)


# Screen-space rings (Y down); these come out clockwise in geometry space.
SHELL = ((0, 0), (10, 0), (10, 10), (0, 10))
# Counter-clockwise once Y is inverted.
HOLE = ((2, 2), (2, 8), (8, 8), (8, 2))
DEGENERATE = ((20, 20), (25, 25), (20, 20))


class EmptyNoder:
    def node(self, rings, precision_scale):  # noqa: ARG002
        return []


class TestPathGeometryReader:
    """Tests for the full reconstruction pass."""

    def test_empty_path(self) -> None:
        geometry = read_path(PathGeometry())
        assert isinstance(geometry, GeometryCollection)
        assert geometry.is_empty

    def test_point(self) -> None:
        """Test that a one-point figure becomes a Y-inverted point."""
        geometry = read_path(PathGeometry(figures=[PathFigure((3.0, 4.0))]))
        assert geometry.equals(Point(3, -4))

    def test_open_line(self) -> None:
        """Test that an open figure becomes a line string of the raw sequence."""
        path = PathGeometry(figures=[figure((0, 0), (5, 5), (10, 0), closed=False)])
        geometry = read_path(path)
        assert isinstance(geometry, LineString)
        assert list(geometry.coords) == [(0, 0), (5, -5), (10, 0)]

    def test_polygon_with_hole(self) -> None:
        path = PathGeometry(figures=[figure(*SHELL), figure(*HOLE)])
        geometry = read_path(path)
        assert isinstance(geometry, Polygon)
        assert len(geometry.interiors) == 1
        assert geometry.area == pytest.approx(64.0)

    def test_stroked_ring(self) -> None:
        """Test that a closed unfilled figure becomes a closed line string."""
        path = PathGeometry(figures=[figure(*SHELL, filled=False)])
        geometry = read_path(path)
        assert isinstance(geometry, LineString)
        assert geometry.is_closed

    def test_mixed_output_order(self) -> None:
        path = PathGeometry(
            figures=[
                figure((50, 50), (60, 60), closed=False),
                figure(*SHELL),
                PathFigure((1.0, 1.0)),
            ]
        )
        geometry = read_path(path)
        assert [g.geom_type for g in geometry.geoms] == ["LineString", "Polygon", "Point"]

    def test_curved_path_rejected(self) -> None:
        path = PathGeometry(figures=[PathFigure((0, 0), [BezierSegment((0, 1), (1, 1), (1, 0))])])
        with pytest.raises(NonLinearGeometryError):
            read_path(path)

    def test_read_flattened(self) -> None:
        """Test that the flattening overload accepts curves."""
        path = PathGeometry(
            figures=[
                PathFigure(
                    (0, 0),
                    [LineSegment((100, 0)), BezierSegment((100, 55), (55, 100), (0, 100))],
                    is_closed=True,
                )
            ]
        )
        geometry = PathGeometryReader().read_flattened(path, tolerance=0.1)
        assert isinstance(geometry, Polygon)
        assert geometry.area > 100 * 100 / 2

    def test_fill_rule_override(self) -> None:
        """Test that a reader-level fill rule replaces the path's."""
        # Two counter-clockwise squares overlapping; one cluster.
        first = ((0, 0), (0, 10), (10, 10), (10, 0))
        second = ((5, 5), (5, 15), (15, 15), (15, 5))
        path = PathGeometry(figures=[figure(*first), figure(*second)], fill_rule=FillRule.EVEN_ODD)

        even_odd = PathGeometryReader().read(path)
        nonzero = PathGeometryReader(fill_rule=FillRule.NONZERO).read(path)
        assert even_odd.area == pytest.approx(150.0)
        assert nonzero.area == pytest.approx(175.0)

    def test_hole_predicate_injected(self) -> None:
        """Test that the hole predicate is used for grouping."""
        far_hole = ((50, 50), (50, 60), (60, 60), (60, 50))
        path = PathGeometry(figures=[figure(*SHELL), figure(*far_hole)])

        default_stats = ConversionStats()
        strict_stats = ConversionStats()
        PathGeometryReader().read(path, default_stats)
        PathGeometryReader(hole_predicate=contained_in_shell).read(path, strict_stats)
        assert default_stats.clusters == 1
        assert strict_stats.clusters == 2
        assert strict_stats.polygons == 2

    def test_kernel_injected(self) -> None:
        """Test that a custom kernel is used for every cluster."""
        reader = PathGeometryReader(kernel=GeometryKernel(noder=EmptyNoder()))
        geometry = reader.read(PathGeometry(figures=[figure(*SHELL)]))
        assert geometry.is_empty

    def test_stats_counted(self) -> None:
        stats = ConversionStats()
        path = PathGeometry(
            figures=[
                figure(*SHELL),
                figure(*HOLE),
                figure(*DEGENERATE),
                figure((0, 0), (1, 1), closed=False),
                PathFigure((1.0, 1.0)),
            ]
        )
        PathGeometryReader().read(path, stats)
        assert stats.clusters == 2
        assert stats.degenerate_clusters == 1
        assert stats.polygons == 1
        assert stats.lines == 1
        assert stats.points == 1


class TestReadSvgPath:
    """Tests for read_svg_path."""

    def test_square(self) -> None:
        geometry = read_svg_path("M 0 0 L 10 0 L 10 10 L 0 10 Z")
        assert isinstance(geometry, Polygon)
        assert geometry.area == pytest.approx(100.0)
        assert geometry.bounds == (0.0, -10.0, 10.0, 0.0)

    def test_unfilled(self) -> None:
        geometry = read_svg_path("M 0 0 L 10 0 L 10 10 Z", filled=False)
        assert isinstance(geometry, LineString)

    def test_curve_needs_tolerance(self) -> None:
        with pytest.raises(NonLinearGeometryError):
            read_svg_path("M 0 0 Q 5 10 10 0 Z")
        geometry = read_svg_path("M 0 0 Q 5 10 10 0 Z", tolerance=0.1)
        assert isinstance(geometry, Polygon)

    def test_malformed(self) -> None:
        with pytest.raises(PathParseError):
            read_svg_path("M 0 0 L 10")
