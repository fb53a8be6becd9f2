"""Assembly of the heterogeneous reader output into one geometry."""

from collections.abc import Sequence

from shapely.geometry import (
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from shapely.geometry.base import BaseGeometry

_MULTI_TYPES: dict[type, type] = {
    Point: MultiPoint,
    LineString: MultiLineString,
    Polygon: MultiPolygon,
}


def build_geometry(geometries: Sequence[BaseGeometry]) -> BaseGeometry:
    """Build the smallest geometry type holding all geometries.

    - No geometries: empty GeometryCollection
    - One geometry: the geometry itself
    - All of one simple type: the matching Multi* geometry
    - Anything else: GeometryCollection

    Args:
        geometries: Points, line strings and polygons in output order

    Returns:
        Composite geometry
    """
    if not geometries:
        return GeometryCollection()
    if len(geometries) == 1:
        return geometries[0]

    kinds = {type(geometry) for geometry in geometries}
    if len(kinds) == 1:
        multi_type = _MULTI_TYPES.get(kinds.pop())
        if multi_type is not None:
            return multi_type(list(geometries))

    return GeometryCollection(list(geometries))
