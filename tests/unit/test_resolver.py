"""Unit tests for polygon resolution of ring clusters."""

import pytest
from shapely.errors import GEOSException
from shapely.geometry import LineString, Polygon

from pathgeom.core.kernel import GeometryKernel
from pathgeom.core.resolver import (
    PRECISION_SCALE,
    Degenerate,
    PolygonResolver,
    Resolved,
    resolve,
)
from pathgeom.domain import Coordinate, FillRule, RingCluster
from pathgeom.exceptions import DegenerateClusterError


def ring(*points: tuple[float, float]) -> tuple[Coordinate, ...]:
    coordinates = tuple(Coordinate(x, y) for x, y in points)
    return (*coordinates, coordinates[0])


SHELL_CW = ring((0, 0), (0, 10), (10, 10), (10, 0))
HOLE_CCW = ring((2, 2), (8, 2), (8, 8), (2, 8))
OVERLAP_CW = ring((5, 5), (5, 15), (15, 15), (15, 5))


class EmptyNoder:
    def node(self, rings, precision_scale):  # noqa: ARG002
        return []


class FailingPolygonizer:
    def polygonize(self, lines):  # noqa: ARG002
        raise GEOSException("TopologyException: side location conflict")


class RecordingNoder:
    def __init__(self) -> None:
        self.scales: list[float] = []

    def node(self, rings, precision_scale):
        self.scales.append(precision_scale)
        return [LineString([c.to_tuple() for c in r]) for r in rings]


class TestResolveFillRules:
    """Tests for fill-rule dependent resolution."""

    @pytest.mark.parametrize("fill_rule", [FillRule.EVEN_ODD, FillRule.NONZERO])
    def test_single_ring(self, fill_rule: FillRule) -> None:
        """Test that one ring yields one polygon without holes."""
        result = resolve(RingCluster(shell=SHELL_CW), fill_rule)
        assert isinstance(result, Resolved)
        (polygon,) = result.polygons
        assert polygon.area == pytest.approx(100.0)
        assert len(polygon.interiors) == 0

    @pytest.mark.parametrize("fill_rule", [FillRule.EVEN_ODD, FillRule.NONZERO])
    def test_shell_with_hole(self, fill_rule: FillRule) -> None:
        """Test that an opposite-wound inner ring is a hole under both rules."""
        result = resolve(RingCluster(shell=SHELL_CW, holes=[HOLE_CCW]), fill_rule)
        (polygon,) = result.polygons
        assert len(polygon.interiors) == 1
        assert polygon.area == pytest.approx(64.0)

    def test_even_odd_same_direction_overlap(self) -> None:
        """Test that even-odd leaves the doubly covered region empty."""
        result = resolve(RingCluster(shell=SHELL_CW, holes=[OVERLAP_CW]), FillRule.EVEN_ODD)
        assert len(result.polygons) == 2
        assert sum(p.area for p in result.polygons) == pytest.approx(150.0)

    def test_nonzero_same_direction_overlap(self) -> None:
        """Test that non-zero fills and merges the overlap."""
        result = resolve(RingCluster(shell=SHELL_CW, holes=[OVERLAP_CW]), FillRule.NONZERO)
        (polygon,) = result.polygons
        assert polygon.area == pytest.approx(175.0)

    @pytest.mark.parametrize("fill_rule", [FillRule.EVEN_ODD, FillRule.NONZERO])
    @pytest.mark.parametrize(
        "hole",
        [
            ring((6, 0), (10, 0), (10, 4), (6, 4)),
            ring((0, 0), (4, 0), (4, 4), (0, 4)),
        ],
        ids=["right-edge", "left-edge"],
    )
    def test_hole_sharing_shell_edges(self, hole, fill_rule: FillRule) -> None:
        """Test that edges shared by shell and hole still bound the hole."""
        result = resolve(RingCluster(shell=SHELL_CW, holes=[hole]), fill_rule)
        (polygon,) = result.polygons
        assert polygon.is_valid
        assert polygon.area == pytest.approx(84.0)
        assert not polygon.contains(Polygon([c.to_tuple() for c in hole]).representative_point())

    def test_bowtie_split_into_valid_polygons(self) -> None:
        """Test that a self-intersecting ring is repaired."""
        bowtie = ring((0, 0), (10, 10), (10, 0), (0, 10))
        result = resolve(RingCluster(shell=bowtie), FillRule.EVEN_ODD)
        assert len(result.polygons) == 2
        assert all(p.is_valid for p in result.polygons)
        assert sum(p.area for p in result.polygons) == pytest.approx(50.0)

    def test_polygons_are_valid(self) -> None:
        result = resolve(RingCluster(shell=SHELL_CW, holes=[OVERLAP_CW]), FillRule.NONZERO)
        assert all(isinstance(p, Polygon) and p.is_valid for p in result.polygons)


class TestDegenerateClusters:
    """Tests for clusters that produce no polygon."""

    def test_shell_with_two_distinct_points(self) -> None:
        """Test that a collapsed shell is degenerate, not an error."""
        result = resolve(RingCluster(shell=ring((0, 0), (5, 5))), FillRule.EVEN_ODD)
        assert isinstance(result, Degenerate)
        assert result.polygons == []
        assert isinstance(result.error, DegenerateClusterError)
        assert "ring 0" in result.error.reason

    def test_degenerate_hole(self) -> None:
        """Test that a collapsed hole makes the whole cluster degenerate."""
        cluster = RingCluster(shell=SHELL_CW, holes=[ring((1, 1), (1, 1), (2, 2))])
        result = resolve(cluster, FillRule.NONZERO)
        assert isinstance(result, Degenerate)
        assert "ring 1" in result.error.reason

    def test_zero_area_ring(self) -> None:
        """Test that collinear points bound no face."""
        result = resolve(RingCluster(shell=ring((0, 0), (5, 0), (10, 0))), FillRule.EVEN_ODD)
        assert isinstance(result, Degenerate)
        assert "no faces" in result.error.reason


class TestKernelInjection:
    """Tests for resolution through an injected kernel."""

    def test_precision_scale_passed_to_noder(self) -> None:
        noder = RecordingNoder()
        resolver = PolygonResolver(GeometryKernel(noder=noder))
        resolver.resolve(RingCluster(shell=SHELL_CW), FillRule.EVEN_ODD)
        assert noder.scales == [PRECISION_SCALE]
        assert PRECISION_SCALE == 1e8

    def test_empty_noding_is_degenerate(self) -> None:
        resolver = PolygonResolver(GeometryKernel(noder=EmptyNoder()))
        result = resolver.resolve(RingCluster(shell=SHELL_CW), FillRule.EVEN_ODD)
        assert isinstance(result, Degenerate)
        assert "noding" in result.error.reason

    def test_kernel_error_is_degenerate(self) -> None:
        """Test that kernel exceptions are turned into a degenerate result."""
        resolver = PolygonResolver(GeometryKernel(polygonizer=FailingPolygonizer()))
        result = resolver.resolve(RingCluster(shell=SHELL_CW), FillRule.NONZERO)
        assert isinstance(result, Degenerate)
        assert "TopologyException" in result.error.reason
