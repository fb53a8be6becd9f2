"""Geometry kernel interfaces and their shapely implementation.

The reconstruction needs three primitives it does not implement itself:

- Noder: splits a set of rings at every intersection so that no crossings
  remain, snapping to a fixed precision grid
- Polygonizer: extracts every bounded face of a noded line arrangement
- Unioner: merges overlapping or adjacent polygons into a minimal cover

Each one is a narrow ``Protocol`` so an alternative kernel (a different
precision model, say) can be injected into ``PathGeometryReader`` without
touching the reconstruction. The default implementations delegate to
shapely/GEOS and keep no state between calls.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from shapely import unary_union
from shapely.geometry import LineString, Polygon
from shapely.geometry.base import BaseGeometry
from shapely.ops import polygonize_full

from pathgeom.domain import Ring


class Noder(Protocol):
    """Computes a fully noded arrangement of a set of rings."""

    def node(self, rings: Sequence[Ring], precision_scale: float) -> list[LineString]:
        """Node rings on a grid of ``1 / precision_scale``."""
        ...


class Polygonizer(Protocol):
    """Extracts polygon faces from noded linework."""

    def polygonize(self, lines: Sequence[LineString]) -> list[Polygon]:
        """Polygonize lines into their bounded faces."""
        ...


class Unioner(Protocol):
    """Merges polygons into a minimal covering set."""

    def union(self, polygons: Sequence[Polygon]) -> list[Polygon]:
        """Union polygons, returning the parts of the result."""
        ...


def polygon_parts(geometry: BaseGeometry) -> list[Polygon]:
    """Collect the non-empty polygons of any geometry.

    Args:
        geometry: Polygon, MultiPolygon or GeometryCollection

    Returns:
        Polygons contained in the geometry
    """
    if geometry.is_empty:
        return []
    if isinstance(geometry, Polygon):
        return [geometry]
    parts: list[Polygon] = []
    for part in getattr(geometry, "geoms", ()):
        parts.extend(polygon_parts(part))
    return parts


def _line_parts(geometry: BaseGeometry) -> list[LineString]:
    if geometry.is_empty:
        return []
    if isinstance(geometry, LineString):
        return [geometry]
    parts: list[LineString] = []
    for part in getattr(geometry, "geoms", ()):
        parts.extend(_line_parts(part))
    return parts


class ShapelyNoder:
    """Snap-rounding noder backed by GEOS overlay.

    A unary union of linework with a ``grid_size`` nodes every intersection
    and rounds vertices to the grid, so the output has no residual crossings
    at that precision. Collinear overlapping edges are merged.
    """

    def node(self, rings: Sequence[Ring], precision_scale: float) -> list[LineString]:
        lines = [LineString([c.to_tuple() for c in ring]) for ring in rings]
        noded = unary_union(lines, grid_size=1.0 / precision_scale)
        return _line_parts(noded)


class ShapelyPolygonizer:
    """Polygonizer backed by the GEOS polygonizer.

    Every bounded face of the arrangement is returned, inner faces included,
    so nested rings produce both the outer face (with the inner ring as its
    hole) and the inner face. Dangles, cut edges and invalid rings bound no
    face and are dropped.
    """

    def polygonize(self, lines: Sequence[LineString]) -> list[Polygon]:
        polygons, _cuts, _dangles, _invalid = polygonize_full(list(lines))
        return polygon_parts(polygons)


class ShapelyUnioner:
    """Cascaded union backed by GEOS."""

    def union(self, polygons: Sequence[Polygon]) -> list[Polygon]:
        if not polygons:
            return []
        return polygon_parts(unary_union(list(polygons)))


@dataclass(frozen=True)
class GeometryKernel:
    """The set of kernel primitives used by the reconstruction.

    Attributes:
        noder: Noding primitive
        polygonizer: Polygonization primitive
        unioner: Union primitive
    """

    noder: Noder = field(default_factory=ShapelyNoder)
    polygonizer: Polygonizer = field(default_factory=ShapelyPolygonizer)
    unioner: Unioner = field(default_factory=ShapelyUnioner)
