"""pathgeom - Convert flattened vector paths into planar geometry.

pathgeom reads vector paths made of open and closed polylines (screen space,
Y pointing down) and rebuilds them as valid shapely geometry (Y pointing up):
points, line strings and polygons with holes. Self-intersections are repaired
by noding the rings of each polygon and the path's fill rule decides which
faces are kept.

Example:
    >>> from pathgeom import read_svg_path
    >>> read_svg_path("M 0 0 L 0 10 L 10 10 L 10 0 Z").geom_type
    'Polygon'
"""

from pathgeom.core.reader import PathGeometryReader, read_path, read_svg_path

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = [
    "PathGeometryReader",
    "__author__",
    "__version__",
    "read_path",
    "read_svg_path",
]
